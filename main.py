"""
Credential Cipher Service - Main Entry Point

A small FastAPI application exposing the encryption health checks.
Credential writes elsewhere in the platform should be disabled while
the startup self-test is failing.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI

from config import config, VERSION
from credential_cipher import CredentialCipher

logger = logging.getLogger(__name__)


# Global state
class AppState:
    """Application state container."""
    cipher: Optional[CredentialCipher] = None
    setup_ok: bool = False
    last_checked: Optional[str] = None

    def run_setup_check(self) -> bool:
        """Run the encryption self-test and record the outcome."""
        self.setup_ok = self.cipher.verify_setup()
        self.last_checked = datetime.now().isoformat()
        return self.setup_ok


app_state = AppState()


def build_cipher() -> CredentialCipher:
    """Create a cipher reading the key from the process configuration."""
    return CredentialCipher(lambda: config.encryption_key)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    if app_state.cipher is None:
        app_state.cipher = build_cipher()

    if app_state.run_setup_check():
        logger.info("Encryption setup verified")
    else:
        logger.warning(
            f"Encryption setup check failed. Set {config.ENCRYPTION_KEY_ENV} "
            "(at least 32 characters) before storing credentials."
        )

    yield


# Create FastAPI app
app = FastAPI(
    title="Credential Cipher",
    description="Encryption at rest for third-party OAuth credentials",
    version=VERSION,
    lifespan=lifespan,
)


# ============================================================================
# Health API
# ============================================================================

def _health_payload() -> dict:
    status = app_state.cipher.status()

    return {
        "success": True,
        "data": {
            **status,
            "last_checked": app_state.last_checked,
            "message": (
                "Credential encryption is properly configured"
                if status["configured"]
                else "Credential encryption is missing or misconfigured"
            ),
        },
    }


@app.get("/api/health/encryption")
async def encryption_health():
    """Report whether the encryption key is present and usable."""
    payload = _health_payload()
    logger.info(
        f"Encryption health check requested: configured={payload['data']['configured']}"
    )
    return payload


@app.post("/api/health/encryption/verify")
async def encryption_verify():
    """Re-run the startup self-test on demand."""
    ok = app_state.run_setup_check()
    return {"success": ok, "last_checked": app_state.last_checked}


# ============================================================================
# Main Entry Point
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        reload=False,
        log_level="info",
    )

import secrets
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from config import AuthConfig

basic_security = HTTPBasic()

# Set by app.py
_auth = AuthConfig()


def init(auth_config):
    """Use credentials from config."""
    global _auth
    _auth = auth_config


def verify_basic_auth(credentials: HTTPBasicCredentials = Depends(basic_security)):
    correct_username = secrets.compare_digest(credentials.username.encode(), _auth.username.encode())
    correct_password = secrets.compare_digest(credentials.password.encode(), _auth.password.encode())
    if not (correct_username and correct_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username

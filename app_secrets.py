from __future__ import annotations
import os
from typing import Optional
import streamlit as st

# Deployment overrides: SHIPMENTS_CSV, AS_OF_DATE, LOG_LEVEL

def _from_secrets(key: str) -> Optional[str]:
    try:
        v = st.secrets.get(key)  # type: ignore[attr-defined]
    except Exception:
        # no .streamlit/secrets.toml, or not running under `streamlit run`
        return None
    return str(v) if v is not None else None

def get_secret(key: str, default: Optional[str] = None) -> Optional[str]:
    """Environment first, then st.secrets; blank values fall through to `default`."""
    for v in (os.environ.get(key), _from_secrets(key)):
        if v is not None and v.strip():
            return v.strip()
    return default

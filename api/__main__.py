"""Run the API with uvicorn: python -m api"""

from __future__ import annotations

import os

import uvicorn

from assetverse.logging_config import uvicorn_log_config

if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "5000")),
        log_config=uvicorn_log_config(source="api"),
    )

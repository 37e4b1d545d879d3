from __future__ import annotations
import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "wordexplorer.main:app",
        host=os.environ.get("WORDEXPLORER_HOST", "127.0.0.1"),
        port=int(os.environ.get("WORDEXPLORER_PORT", "8000")),
    )

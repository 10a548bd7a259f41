# mutant_dna/cli/commands/serve.py
"""
Serve command.

Usage:
    mutant-dna serve                      # host/port from config
    mutant-dna serve --port 9000 --reload
"""

from __future__ import annotations

from typing import Optional

import uvicorn

from mutant_dna.cli.ui import ui
from mutant_dna.cli.utils import load_config_or_exit


def command(host: Optional[str] = None, port: Optional[int] = None, reload: bool = False) -> None:
    config = load_config_or_exit()

    host = host or config.api.host
    port = port or config.api.port

    ui.header("mutant-dna API", f"http://{host}:{port}  (docs at /docs)")
    uvicorn.run(
        "mutant_dna.api.app:app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=config.logging.level.lower(),
    )

"""Run the Athena gateway with uvicorn: ``python -m athena_gateway``."""

from __future__ import annotations

import uvicorn

from athena_gateway.core.config import settings


def main() -> None:
    uvicorn.run(
        "athena_gateway.main:app",
        host="0.0.0.0",
        port=settings.service_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

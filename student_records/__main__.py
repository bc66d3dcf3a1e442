"""Run the API with uvicorn: ``python -m student_records``."""

import uvicorn

from student_records.configs import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "student_records.api.main:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

from openmeteo_cli.CLI import run_cli
from openmeteo_cli.config import setup_logging


def main() -> None:
    setup_logging()
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()

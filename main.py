"""Entrypoint to print the ledger reports."""
from timeledger.cli import main as cli_main


def main() -> int:
    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())

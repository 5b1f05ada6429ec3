"""Run the claim tracker CLI with ``python -m rd_claims.cli``."""

from __future__ import annotations

from .app import app


def main() -> None:
    app(prog_name="rd-claims")


if __name__ == "__main__":
    main()

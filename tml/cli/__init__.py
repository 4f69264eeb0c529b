"""CLI - main entry point."""

import sys


def _wants_version(argv: list[str]) -> bool:
    """True if ``--version`` appears before any ``--`` separator."""
    options = argv[: argv.index("--")] if "--" in argv else argv
    return "--version" in options


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from tml.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if _wants_version(argv):
        from tml.api.config.get_package_version import get_package_version

        print(f"tml {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(argv, prog_name="tml")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0

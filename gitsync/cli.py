import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import SyncConfig
from .git.workflow import GitSyncWorkflow
from .repo import find_repo_root

USAGE = "Usage: gitsync [<path>] [--gui] [--no-client] [--verbose]"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    path = "."
    show_gui = False
    open_client = True
    verbose = False

    for arg in args:
        if arg in ("-h", "--help"):
            print(USAGE)
            return 0
        elif arg == "--gui":
            show_gui = True
        elif arg == "--no-client":
            open_client = False
        elif arg in ("-v", "--verbose"):
            verbose = True
        elif arg.startswith("-"):
            print(f"Unknown option: {arg}\n{USAGE}", file=sys.stderr)
            return 2
        else:
            path = arg

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    start = Path(path)
    if not start.exists():
        print(f"Path does not exist: {start}", file=sys.stderr)
        return 2

    repo_path = find_repo_root(start)
    config = SyncConfig.load(repo_path)
    if not open_client:
        config = replace(config, open_gui_client=False)

    outcome = GitSyncWorkflow(repo_path, config).run()
    print(outcome.text, file=sys.stdout if outcome.success else sys.stderr)

    if show_gui:
        from .gui.viewer import ReportWindow
        ReportWindow(outcome, repo_path).run()

    return 0 if outcome.success else 1


if __name__ == "__main__":
    sys.exit(main())

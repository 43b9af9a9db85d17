"""Main entry point: optionally run development checks, then look up a resource."""

import subprocess
import sys
from pathlib import Path

from src.find_base_dir_cli import main as find_base_dir_main


def run_command(cmd_list: list[str]) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> int:
    """Run the lookup, preceded by the development checks when --dev is given."""
    argv = sys.argv[1:]
    if "--dev" in argv:
        argv.remove("--dev")
        print("--- Running Development Checks ---")
        dev_script = Path(__file__).parent / "dev.py"
        run_command([sys.executable, str(dev_script), "--ci"])
        print("\nDevelopment checks passed. Proceeding with lookup.\n")

    return find_base_dir_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())

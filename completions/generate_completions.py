#!/usr/bin/env python3
"""Generate shell completion scripts for the safepath CLI."""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from typer.main import get_command
from click.shell_completion import get_completion_class

from safepath.cli.main import app


def generate_completions():
    """Generate completion scripts for all supported shells."""
    command = get_command(app)

    for shell in ["bash", "zsh", "fish"]:
        print(f"Generating {shell} completion...")

        completion_class = get_completion_class(shell)
        completion = completion_class(command, {}, "safepath", "_SAFEPATH_COMPLETE")
        completion_script = completion.source()

        output_file = Path(__file__).parent / f"safepath.{shell}"
        with open(output_file, "w") as f:
            f.write(completion_script)

        print(f"  Saved to: {output_file}")

    print("\nCompletion scripts generated successfully!")
    print("\nTo install completions:")
    print("  Bash: source completions/safepath.bash")
    print("  Zsh:  source completions/safepath.zsh")
    print("  Fish: source completions/safepath.fish")


if __name__ == "__main__":
    generate_completions()

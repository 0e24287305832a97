from __future__ import annotations

import logging

import click

from imgcmp import __version__
from imgcmp.commands.compare import compare_cmd
from imgcmp.commands.doctor import doctor_cmd


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="imgcmp")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def main(verbose: bool) -> None:
    """imgcmp: pixel-level image comparison with highlighted diffs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


main.add_command(compare_cmd, name="compare")
main.add_command(doctor_cmd, name="doctor")


if __name__ == "__main__":
    main()

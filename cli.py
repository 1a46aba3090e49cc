# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

"""PageSim CLI - Command Line Interface for the LRU paging simulator"""

import json
import logging
import sys
from pathlib import Path

import click
import yaml

# Force UTF-8 encoding for Windows
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from pagesim import __version__
from pagesim.core.config import load_config
from pagesim.core.exceptions import PageSimError
from pagesim.core.job_source import load_jobs
from pagesim.core.logger import get_logger
from pagesim.core.page_manager import PageManager
from pagesim.core.report import render_report, report_dict

logger = logging.getLogger("pagesim.cli")


@click.group()
@click.version_option(version=__version__)
def cli():
    """PageSim - two-tier LRU page replacement simulator.

    Feeds a file of job page requests through a physical memory tier
    and a swap tier, then reports hits, faults and aborted jobs.

    Core commands:
        pagesim run JOBS.csv   - Simulate a job file
        pagesim config         - Show the effective configuration
    """
    pass


@cli.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--memory", "-m", type=click.IntRange(min=0), help="Physical memory capacity (pages)")
@click.option("--swap", "-s", type=click.IntRange(min=0), help="Swap memory capacity (pages)")
@click.option("--config", "-c", "config_file", type=click.Path(dir_okay=False), help="Config file")
@click.option("--output", "-o", type=click.Choice(["text", "json"]), default="text")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def run(file_path: str, memory: int, swap: int, config_file: str, output: str, verbose: bool):
    """Simulate the page requests in FILE_PATH.

    Each line of the file is "jobId,pageId"; a page id of -999
    releases every page held by the job.

    Examples:
        pagesim run jobs.csv
        pagesim run jobs.csv -m 10 -s 15
        pagesim run jobs.csv -o json
    """
    try:
        settings = load_config(Path(config_file) if config_file else None)
        level = "DEBUG" if verbose else settings.observability.log_level
        get_logger(
            "pagesim",
            level=level,
            log_dir=settings.paths.log_dir,
            file_output=settings.observability.file_logging,
        )

        memory_capacity = settings.simulation.memory_capacity if memory is None else memory
        swap_capacity = settings.simulation.swap_capacity if swap is None else swap

        jobs = load_jobs(file_path)
        logger.info(
            f"Simulating {len(jobs)} records "
            f"(memory={memory_capacity}, swap={swap_capacity})"
        )

        manager = PageManager(memory_capacity, swap_capacity)
        manager.queue_jobs(jobs)
        manager.process()
    except PageSimError as e:
        click.echo(f"[-] Error: {e}", err=True)
        sys.exit(1)

    if output == "json":
        click.echo(json.dumps(report_dict(manager), indent=2))
    else:
        click.echo(render_report(manager))


@cli.command("config")
@click.option("--config", "-c", "config_file", type=click.Path(dir_okay=False), help="Config file")
def show_config(config_file: str):
    """Show the effective configuration as YAML."""
    try:
        settings = load_config(Path(config_file) if config_file else None)
    except PageSimError as e:
        click.echo(f"[-] Error: {e}", err=True)
        sys.exit(1)

    click.echo(yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=False))


@cli.command("version")
def show_version():
    """Show PageSim version."""
    click.echo(f"PageSim - LRU Page Replacement Simulator v{__version__}")
    click.echo("License: BSL 1.1 (converts to Apache 2.0 on 2028-11-05)")


if __name__ == "__main__":
    cli()

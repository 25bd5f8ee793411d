"""Command line interface for Team Shuffler."""

import random
import sys
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
import yaml

from team_shuffler.config import Config, EXPORT_FORMATS
from team_shuffler.export import export_teams, format_datetime
from team_shuffler.partition import member_label, team_count
from team_shuffler.roster import Roster, load_names_file
from team_shuffler.shuffler import TeamShuffler
from team_shuffler.validators import validate_roster_size, validate_team_size


def load_config(config_file: Optional[Path]) -> Config:
  """Load the config file if given, exiting on errors."""
  config = Config()
  if config_file is None:
    return config

  try:
    config.load_from_file(config_file)
  except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
    click.secho(f"Error: {e}", fg="red")
    sys.exit(1)
  return config

def build_roster(config: Config, names: tuple[str, ...], names_file: Optional[Path]) -> Roster:
  """Collect names from the command line and the names file into a roster."""
  roster = Roster(max_names=config.max_names)
  for name in names:
    try:
      roster.add(name)
    except ValueError as e:
      click.secho(f"Skipping {name.strip()!r}: {e}", fg="yellow")

  if names_file is not None:
    try:
      file_names = load_names_file(names_file)
    except (FileNotFoundError, ValueError) as e:
      click.secho(f"Error: {e}", fg="red")
      sys.exit(1)

    added, skipped = roster.add_bulk("\n".join(file_names))
    click.secho(f"Loaded {len(added)} names from {names_file}", fg="blue")
    if skipped:
      click.secho(
        f"Only {len(added)} names added from {names_file.name}. "
        f"Maximum {config.max_names} players allowed.",
        fg="yellow",
      )
  return roster

def default_team_size(config: Config, num_names: int) -> int:
  """Configured team size, capped so a small roster still forms one team."""
  return min(config.team_size, max(config.min_team_size, num_names))

def print_teams(teams: list[list[str]]) -> None:
  for number, team in enumerate(teams, start=1):
    click.secho(f"\nTeam {number}", fg="blue", bold=True)
    for idx, name in enumerate(team):
      click.echo(f"  {member_label(idx)}  {name}")
    click.secho(f"  {len(team)} {'player' if len(team) == 1 else 'players'}", fg="bright_black")

@click.group()
def cli():
  """Team Shuffler CLI for splitting a roster into random teams."""
  pass

@cli.command()
@click.option("--name", "-n", "names", multiple=True, help="Player name (repeatable)")
@click.option("--names-file", "-f", type=click.Path(path_type=Path),
              help="File of comma/newline separated names, or a CSV with a name column")
@click.option("--team-size", "-s", type=int, default=None, help="Players per team")
@click.option("--config", "-c", "config_file", type=click.Path(path_type=Path), help="YAML config file")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible shuffle")
@click.option("--export", "-e", "formats", type=click.Choice(EXPORT_FORMATS), multiple=True,
              help="Export format (repeatable); defaults to the configured formats")
@click.option("--no-export", is_flag=True, help="Only print the teams")
@click.option("--output-dir", "-o", type=click.Path(file_okay=False, path_type=Path),
              help="Directory for exported files")
def shuffle(names: tuple[str, ...], names_file: Optional[Path], team_size: Optional[int],
            config_file: Optional[Path], seed: Optional[int], formats: tuple[str, ...],
            no_export: bool, output_dir: Optional[Path]):
  """Shuffle the players into random teams and export the result."""
  config = load_config(config_file)
  roster = build_roster(config, names, names_file)
  if team_size is None:
    team_size = default_team_size(config, len(roster))

  rng = random.Random(seed) if seed is not None else None
  generated_at = datetime.now()
  shuffler = TeamShuffler(config)
  try:
    teams = shuffler.generate(roster.names, team_size, rng)
  except ValueError as e:
    click.secho(f"Error: {e}", fg="red")
    sys.exit(1)

  click.secho(config.title, fg="blue", bold=True)
  click.secho(f"Generated on: {format_datetime(generated_at)}", fg="green")
  click.secho(f"Team Size: {team_size} players per team", fg="blue")
  print_teams(teams)

  summary = shuffler.get_team_summary(teams)
  click.secho(
    f"\n{summary['total_players']} players in {summary['team_count']} teams "
    f"(average {summary['average_team_size']})",
    fg="green",
  )

  if no_export:
    return

  output_dir = output_dir or config.output_dir
  for fmt in formats or config.export_formats:
    try:
      path = export_teams(teams, fmt, output_dir, generated_at, team_size, config.title)
    except OSError as e:
      click.secho(f"Error: Failed to export {fmt.upper()} to {output_dir}: {e}", fg="red")
      sys.exit(1)
    click.secho(f"Exported {fmt.upper()} to {path}", fg="green")

@cli.command()
@click.argument("names_file", type=click.Path(exists=True, path_type=Path))
@click.option("--team-size", "-s", type=int, default=None, help="Players per team")
@click.option("--config", "-c", "config_file", type=click.Path(path_type=Path), help="YAML config file")
def validate(names_file: Path, team_size: Optional[int], config_file: Optional[Path]):
  """Validate a names file and preview the number of teams."""
  config = load_config(config_file)

  try:
    names = load_names_file(names_file)
  except ValueError as e:
    click.secho(f"Error: {e}", fg="red")
    sys.exit(1)

  errors = []
  counts = Counter(names)
  duplicates = sorted(name for name, count in counts.items() if count > 1)
  if duplicates:
    errors.append(f"Duplicate names: {duplicates}")
  unique = len(counts)
  if team_size is None:
    team_size = default_team_size(config, unique)
  try:
    validate_roster_size(unique, config.min_names, config.max_names)
  except ValueError as e:
    errors.append(str(e))
  try:
    validate_team_size(team_size, unique, config.min_team_size)
  except ValueError as e:
    errors.append(str(e))

  click.secho(f"Total Players: {unique}", fg="blue")
  click.secho(f"Teams Created: {team_count(unique, team_size)}", fg="blue")

  if not errors:
    click.secho("✅ Roster is valid!", fg="green")
    return

  for error in errors:
    click.secho(f"  • {error}", fg="red")
  click.secho(f"\n❌ Found validation errors in {names_file}", fg="red")
  sys.exit(1)

@cli.command("init-config")
@click.argument("config_file", type=click.Path(path_type=Path))
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init_config(config_file: Path, force: bool):
  """Write a config file with the default settings."""
  if config_file.exists() and not force:
    if not click.confirm(f"{config_file} already exists; overwrite?", default=False):
      click.secho(f"Skipping {config_file}", fg="green")
      return

  Config().save_to_file(config_file)
  click.secho(f"Wrote default config to {config_file}", fg="green")

if __name__ == "__main__":
  cli()

"""Configuration management for Team Shuffler."""

from pathlib import Path
from typing import List

import yaml

EXPORT_FORMATS = ("txt", "csv", "yaml", "pdf", "png")


def _positive_int(value, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{key} must be a positive integer")
    return value


class Config:
    """Configuration class for team shuffling settings."""

    def __init__(self):
        """Initialize configuration with default values."""
        self.team_size: int = 3
        self.min_team_size: int = 2
        self.min_names: int = 2
        self.max_names: int = 30
        self.title: str = "TeamShuffler Pro"
        self.export_formats: List[str] = ["txt"]
        self.output_dir: Path = Path(".")

    def load_from_file(self, config_path: Path) -> None:
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML file is invalid
            ValueError: If the configuration structure is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a YAML dictionary")

        team_config = config_data.get('team') or {}
        players_config = config_data.get('players') or {}
        export_config = config_data.get('export') or {}

        if 'size' in team_config:
            self.team_size = _positive_int(team_config['size'], 'team.size')

        if 'min' in team_config:
            min_size = _positive_int(team_config['min'], 'team.min')
            if min_size < 2:
                raise ValueError("team.min must be at least 2")
            self.min_team_size = min_size

        if 'min' in players_config:
            min_names = _positive_int(players_config['min'], 'players.min')
            if min_names < 2:
                raise ValueError("players.min must be at least 2")
            self.min_names = min_names

        if 'max' in players_config:
            self.max_names = _positive_int(players_config['max'], 'players.max')

        if self.max_names < self.min_names:
            raise ValueError(
                f"players.max ({self.max_names}) must not be below players.min ({self.min_names})"
            )

        if 'title' in export_config:
            self.title = str(export_config['title'])

        if 'formats' in export_config:
            formats = export_config['formats']
            if isinstance(formats, str):
                formats = [fmt.strip() for fmt in formats.split(',')]
            if not isinstance(formats, list):
                raise ValueError("export.formats must be a list or comma-separated string")

            unknown = sorted(set(formats) - set(EXPORT_FORMATS))
            if unknown:
                raise ValueError(
                    f"Unknown export formats: {unknown}. Expected any of {list(EXPORT_FORMATS)}"
                )
            self.export_formats = list(formats)

        if 'output_dir' in export_config:
            self.output_dir = Path(export_config['output_dir'])

    def to_dict(self) -> dict:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary representation of the configuration
        """
        return {
            'team': {
                'size': self.team_size,
                'min': self.min_team_size,
            },
            'players': {
                'min': self.min_names,
                'max': self.max_names,
            },
            'export': {
                'title': self.title,
                'formats': list(self.export_formats),
                'output_dir': str(self.output_dir),
            },
        }

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a YAML file.

        Args:
            config_path: Path where to save the configuration
        """
        config_dict = self.to_dict()

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=True)

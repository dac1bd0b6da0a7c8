"""
Modulo per la gestione della configurazione del calcolatore di durata
"""
import copy
import logging
import os
import yaml
from typing import Dict, Any, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILES = ('clock_duration.yml', 'clock_duration.yaml')


def find_default_config(directory: Optional[str] = None) -> Optional[str]:
    """Return the first default config file found in ``directory`` (cwd by default)."""
    directory = directory or os.getcwd()
    for name in DEFAULT_CONFIG_FILES:
        candidate = os.path.join(directory, name)
        if os.path.exists(candidate):
            return candidate
    return None


class Config:
    """Classe per gestire la configurazione dell'applicazione"""

    DEFAULT_CONFIG = {
        'log_level': 'WARNING',
        'strict_exit': False,
        'messages': {
            'success': 'Duration: {duration}',
            'error': 'Error: {message}',
        },
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Inizializza la configurazione

        Args:
            config_file: Path al file di configurazione YAML (opzionale)
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)
        elif config_file:
            logger.debug("Config file %s not found, using defaults", config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Carica la configurazione da file YAML

        Args:
            config_file: Path al file di configurazione
        """
        logger.debug("Loading configuration from %s", config_file)
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading configuration file: {e}") from e

        if file_config is None:
            return
        if not isinstance(file_config, dict):
            raise ConfigError("Error loading configuration file: top level must be a mapping")

        for key, value in file_config.items():
            if key == 'messages' and isinstance(value, dict):
                self._deep_merge(self.config[key], value)
            else:
                self.config[key] = value
        self._check_types()
        self._check_messages()

    def _check_types(self) -> None:
        if not isinstance(self.config.get('strict_exit'), bool):
            raise ConfigError(
                f"strict_exit must be true or false, got {self.config.get('strict_exit')!r}"
            )
        log_level = self.config.get('log_level')
        if log_level is not None and not isinstance(log_level, str):
            raise ConfigError(f"log_level must be a level name, got {log_level!r}")

    def _deep_merge(self, base: dict, update: dict) -> None:
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _check_messages(self) -> None:
        # Broken templates fail here, not on first output
        try:
            self.render_success('0 hours 0 minutes')
            self.render_error('Invalid time format')
        except (KeyError, IndexError, ValueError, AttributeError, TypeError) as e:
            raise ConfigError(f"Invalid message template: {e!r}") from e

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Aggiorna la configurazione con argomenti da CLI
        Gli argomenti CLI hanno precedenza sul file di configurazione

        Args:
            args: Dizionario con gli argomenti da CLI
        """
        for key, value in args.items():
            if value is not None:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        return self.config.copy()

    def render_success(self, duration: str) -> str:
        """Build the stdout line for a computed duration."""
        return self.config['messages']['success'].format(duration=duration)

    def render_error(self, message: str) -> str:
        """Build the stdout line for a rejected timestamp."""
        return self.config['messages']['error'].format(message=message)

"""
YAML settings loader with validation.
"""

from pathlib import Path
import logging
import yaml

from ..config.schemas import RotationSettings, configure

logger = logging.getLogger(__name__)


class SettingsLoader:
    """Load and validate library settings from YAML files."""
    
    @staticmethod
    def load(filepath: str | Path) -> RotationSettings:
        """
        Load a settings file.
        
        Args:
            filepath: Path to YAML settings file
        
        Returns:
            Validated settings (not yet active)
        """
        filepath = Path(filepath)
        
        if not filepath.exists():
            raise FileNotFoundError(f"Settings file not found: {filepath}")
        
        with open(filepath, 'r') as f:
            raw_config = yaml.safe_load(f) or {}
        
        # Validate with Pydantic
        settings = RotationSettings(**raw_config)
        logger.info("Loaded rotation settings from %s", filepath)
        return settings


def load_settings(filepath: str | Path, activate: bool = True) -> RotationSettings:
    """
    Load settings from YAML and, by default, make them active.
    
    Example:
        >>> settings = load_settings("rotations.yaml")
        >>> settings.default_dtype
        'float32'
    """
    settings = SettingsLoader.load(filepath)
    if activate:
        configure(settings)
    return settings

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing import Optional, Tuple
import logging, pathlib, yaml

CONFIG_FILENAME = "progress-printer.yml"
DEFAULT_CONFIG_PATH = pathlib.Path(__file__).parent / CONFIG_FILENAME

log = logging.getLogger("progress_printer")

class ConfigError(RuntimeError):
    """The printer configuration file is missing or invalid."""

class RenderOptions(BaseModel):
    model_config = ConfigDict(frozen=True)
    hide_group_header: bool = Field(False, description="Never print group (class) headers")
    simple_output: bool = Field(False, description="Use the ASCII outcome codes instead of markers")
    debug_mode: bool = Field(False, description="One outcome per line, with a label")
    show_config: bool = Field(False, description="Print the configuration file path at startup")

class MarkerSet(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    pass_: str = Field("✓", alias="pass")
    fail: str = Field("✖")
    error: str = Field("⚈")
    skipped: str = Field("➦")
    incomplete: str = Field("ℹ")

    @classmethod
    def simple(cls) -> "MarkerSet":
        return cls(pass_=".", fail="F", error="E", skipped="S", incomplete="I")

class PrinterConfig(BaseModel):
    options: RenderOptions = Field(default_factory=RenderOptions)
    markers: MarkerSet = Field(default_factory=MarkerSet)

    @classmethod
    def fallback(cls) -> "PrinterConfig":
        return cls(options=RenderOptions(simple_output=True), markers=MarkerSet.simple())

def find_config_file(name: str = CONFIG_FILENAME, start: Optional[pathlib.Path] = None) -> pathlib.Path:
    """Nearest ``name`` in ``start`` or any of its parents, else the packaged default."""
    here = pathlib.Path(start or pathlib.Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return DEFAULT_CONFIG_PATH

def load_config(path) -> PrinterConfig:
    try:
        data = yaml.safe_load(pathlib.Path(path).read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Unable to read configuration file {path}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping")
    try:
        return PrinterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration file {path}: {e}") from e

def load_config_or_fallback(path) -> Tuple[PrinterConfig, Optional[str]]:
    try:
        cfg = load_config(path)
    except ConfigError as e:
        log.warning("%s; using simple output", e)
        return PrinterConfig.fallback(), str(e)
    log.debug("Loaded printer configuration from %s", path)
    return cfg, None

# src/seo_auditor/config.py
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Set, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

ReportHandler = Callable[[Dict[str, Set[str]]], Any]


# --- Output targets ---

@dataclass(frozen=True)
class HandlerOutput:
    """Hands the finished report to a caller-supplied function."""
    handler: ReportHandler


@dataclass(frozen=True)
class FileOutput:
    """Writes the finished report as JSON to `path`."""
    path: Path


@dataclass(frozen=True)
class ConsoleOutput:
    """Prints the finished report to stdout."""


OutputTarget = Union[HandlerOutput, FileOutput, ConsoleOutput]


class AuditConfig(BaseModel):
    """
    Immutable set of audit options.

    Every option has a default; overrides are merged in at construction time.
    Options can be passed by their field name (``warn_title_length``) or by
    their camelCase option name (``warnTitleLength``), which is what JSON
    settings files use.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    # Rule switches
    warn_title_length: bool = Field(True, alias="warnTitleLength")
    warn_url_length: bool = Field(True, alias="warnUrlLength")
    warn_duplicate_headings: bool = Field(True, alias="warnDuplicateHeadings")
    warn_image_alt_attribute: bool = Field(True, alias="warnImageAltAttribute")
    warn_image_title_attribute: bool = Field(True, alias="warnImageTitleAttribute")
    warn_title_common_words: bool = Field(True, alias="warnTitleCommonWords")
    warn_url_common_words: bool = Field(True, alias="warnUrlCommonWords")

    # Thresholds
    threshold_length: int = Field(80, ge=0, alias="thresholdLength")
    threshold_length_percentage: float = Field(0.7, ge=0, le=1, alias="thresholdLengthPercentage")
    threshold_common_words_percent: float = Field(40, ge=0, le=100, alias="thresholdCommonWordsPercent")
    threshold_length_for_cw_check: int = Field(35, ge=0, alias="thresholdLengthForCWCheck")

    # Page selection
    extensions: Tuple[str, ...] = (".md", ".mdx")
    ignore: Tuple[str, ...] = ("/404.html",)

    # Report destination: handler, file path or None (console)
    output: Optional[Union[ReportHandler, str, Path]] = None

    @field_validator("threshold_length", "threshold_length_for_cw_check", mode="before")
    @classmethod
    def reject_non_integral_lengths(cls, v: Any) -> Any:
        """Lengths are whole character counts; 80.5 is refused instead of truncated."""
        if isinstance(v, bool) or (isinstance(v, float) and not v.is_integer()):
            raise ValueError("length thresholds must be whole numbers")
        return v

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Accepts 'md' as well as '.md'."""
        return tuple(ext if ext.startswith(".") else f".{ext}" for ext in v)

    @field_validator("output", mode="before")
    @classmethod
    def check_output(cls, v: Any) -> Any:
        if v is None or callable(v) or isinstance(v, (str, Path)):
            return v
        raise ValueError(f"output must be a callable, a file path or None, got {type(v).__name__}")

    @property
    def output_target(self) -> OutputTarget:
        """The report destination, resolved once from the `output` option."""
        if self.output is None:
            return ConsoleOutput()
        if isinstance(self.output, (str, Path)):
            return FileOutput(Path(self.output))
        return HandlerOutput(self.output)

    @property
    def url_length_limit(self) -> float:
        """URL length at which the URL length rule fires."""
        return self.threshold_length * self.threshold_length_percentage

"""Configuration models for preview rendering and file processing."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ENCODING = "utf-8"


class PreviewOptions(BaseModel):
    """Display switches for the annotated diff preview."""

    model_config = ConfigDict(frozen=True)

    show_spaces: bool = False  # Render spaces as "·" and tabs as " ▸  "
    hide_original_lines: bool = False  # Skip the "┌" block of modified lines
    show_unchanged_lines: bool = False
    keep_original_indentation: bool = False  # Disable indentation trimming
    hide_deleted_lines: bool = False

    @property
    def trims_indentation(self) -> bool:
        """Indentation trimming only applies when nothing else needs the raw text."""
        return not (
            self.keep_original_indentation
            or self.show_spaces
            or self.show_unchanged_lines
        )


class ProcessOptions(BaseModel):
    """Options for a single ``process_file`` call."""

    model_config = ConfigDict(frozen=True)

    preview: bool = False  # Render instead of writing
    unified_diff: bool = False  # Preview as a unified diff instead of the annotated layout
    hide_log_of_unchanged_file: bool = False
    preview_options: PreviewOptions = Field(default_factory=PreviewOptions)
    encoding: str = DEFAULT_ENCODING

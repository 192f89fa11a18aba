"""Shared data models used across generator modules."""

from dataclasses import dataclass, field
from typing import Any, Optional

from aem_dialog_gen.domain.enums import Layout


class DialogConfigError(ValueError):
    """A dialog config value the generator refuses to render."""
    pass


def child_fields(config: dict[str, Any]) -> list[dict[str, Any]]:
    """Nested fields of a dialog, section or composite field.

    ``fields`` and ``items`` are interchangeable; ``fields`` wins when both
    are non-empty.
    """
    return config.get('fields') or config.get('items') or []


@dataclass
class SectionConfig:
    """A tab or accordion item."""

    title: str
    name: Optional[str] = None
    fields: list[dict[str, Any]] = field(default_factory=list)
    active: bool = False
    show_if: Optional[dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], index: int) -> 'SectionConfig':
        return cls(
            title=data.get('title') or f'Tab {index + 1}',
            name=data.get('name'),
            fields=child_fields(data),
            active=bool(data.get('active')),
            show_if=data.get('showIf'),
        )


@dataclass
class DialogConfig:
    """Root of a parsed ``dialog.json``."""

    title: str
    layout: Layout
    sections: list[SectionConfig] = field(default_factory=list)
    fields: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any], component_name: str) -> 'DialogConfig':
        tabs = data.get('tabs') or []
        fields = child_fields(data)
        declared = data.get('layout') or Layout.TABS.value

        if declared == Layout.SIMPLE.value or (not tabs and fields):
            layout = Layout.SIMPLE
        elif declared == Layout.ACCORDION.value:
            layout = Layout.ACCORDION
        else:
            layout = Layout.TABS

        return cls(
            title=data.get('title') or component_name[:1].upper() + component_name[1:],
            layout=layout,
            sections=[SectionConfig.from_dict(tab, i) for i, tab in enumerate(tabs)],
            fields=fields,
        )


@dataclass
class GenerateOptions:
    """Options controlling a generation run."""

    source_dir: str
    target_dir: str
    dialog_file_name: str = 'dialog.json'
    use_folder_structure: bool = True
    verbose: bool = False
    stable_names: bool = True


@dataclass
class GenerationError:
    """A failure for a single component."""

    component: str
    error: str


@dataclass
class GenerateResult:
    """Result summary of a generation run."""

    components_found: int
    dialogs_written: int
    errors_count: int
    target_dir: str
    written_files: list[str] = field(default_factory=list)
    errors: list[GenerationError] = field(default_factory=list)

"""Component scanner for AEM source trees."""
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class ComponentScanError(Exception):
    """Error scanning the source tree."""
    pass


@dataclass
class ComponentSource:
    """One component folder and its dialog config, if it has one."""
    name: str
    directory: str
    dialog_path: Optional[str] = None

    @property
    def has_dialog(self) -> bool:
        return self.dialog_path is not None

    def load_config(self) -> dict[str, Any]:
        """Parse the component's dialog config file."""
        with open(self.dialog_path, 'r', encoding='utf-8') as f:
            return json.load(f)


class ComponentScanner:
    """Finds component folders directly under a source directory."""

    def __init__(self, dialog_file_name: str = 'dialog.json'):
        self.dialog_file_name = dialog_file_name

    def scan(self, source_dir: str) -> List[ComponentSource]:
        """List component folders in name order.

        Raises:
            ComponentScanError: ``source_dir`` does not exist.
        """
        if not os.path.isdir(source_dir):
            raise ComponentScanError(f"Source folder does not exist: {source_dir}")

        components = []
        for entry in sorted(os.listdir(source_dir)):
            directory = os.path.join(source_dir, entry)
            if not os.path.isdir(directory):
                continue
            dialog_path = os.path.join(directory, self.dialog_file_name)
            components.append(ComponentSource(
                name=entry,
                directory=directory,
                dialog_path=dialog_path if os.path.isfile(dialog_path) else None,
            ))

        logger.debug("Scanned %s: %d component folders", source_dir, len(components))
        return components

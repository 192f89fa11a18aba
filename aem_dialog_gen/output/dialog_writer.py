"""Dialog XML output.

Writes one dialog per component into the target content tree, either as
``<component>/_cq_dialog/.content.xml`` or as ``<component>/_cq_dialog.xml``.
"""

import logging
import os

logger = logging.getLogger(__name__)

DIALOG_FOLDER = '_cq_dialog'
CONTENT_FILE = '.content.xml'
FLAT_DIALOG_FILE = '_cq_dialog.xml'


class DialogWriter:
    """Writes generated dialog XML under a target directory."""

    def __init__(self, target_dir: str, use_folder_structure: bool = True):
        self.target_dir = target_dir
        self.use_folder_structure = use_folder_structure

    def dialog_path(self, component_name: str) -> str:
        component_dir = os.path.join(self.target_dir, component_name)
        if self.use_folder_structure:
            return os.path.join(component_dir, DIALOG_FOLDER, CONTENT_FILE)
        return os.path.join(component_dir, FLAT_DIALOG_FILE)

    def write(self, component_name: str, xml: str) -> str:
        """Write one dialog, creating folders as needed. Returns the file path."""
        path = self.dialog_path(component_name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(xml)
        logger.debug("Wrote %d characters to %s", len(xml), path)
        return path

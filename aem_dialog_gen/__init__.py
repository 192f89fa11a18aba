"""Generate AEM ``_cq_dialog`` XML from JSON dialog configs."""

from aem_dialog_gen.dialog_assembler import generate_dialog_xml
from aem_dialog_gen.domain.models import DialogConfigError

__all__ = ['generate_dialog_xml', 'DialogConfigError']

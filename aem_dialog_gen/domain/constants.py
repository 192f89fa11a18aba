"""Resource types, namespaces and fixed attribute tables.

The resource-type strings are the contract with the AEM runtime and must
match exactly what Granite registers.
"""

from aem_dialog_gen.domain.enums import FieldType

# ── Resource Types ───────────────────────────────────────────────────────

CORAL = 'granite/ui/components/coral/foundation'

RESOURCE_TYPES: dict[str, str] = {
    FieldType.TEXTFIELD.value: f'{CORAL}/form/textfield',
    FieldType.TEXTAREA.value: f'{CORAL}/form/textarea',
    FieldType.PATHFIELD.value: f'{CORAL}/form/pathfield',
    FieldType.CHECKBOX.value: f'{CORAL}/form/checkbox',
    FieldType.SELECT.value: f'{CORAL}/form/select',
    FieldType.DATEPICKER.value: f'{CORAL}/form/datepicker',
    FieldType.NUMBERFIELD.value: f'{CORAL}/form/numberfield',
    FieldType.COLORFIELD.value: f'{CORAL}/form/colorfield',
    FieldType.FILEUPLOAD.value: 'cq/gui/components/authoring/dialog/fileupload',
    FieldType.SWITCH.value: f'{CORAL}/form/switch',
    FieldType.HIDDEN.value: f'{CORAL}/form/hidden',
    FieldType.MULTIFIELD.value: f'{CORAL}/form/multifield',
    FieldType.FIELDSET.value: f'{CORAL}/form/fieldset',
    FieldType.CONTAINER.value: f'{CORAL}/container',
    FieldType.WELL.value: f'{CORAL}/well',
    FieldType.FIXEDCOLUMNS.value: f'{CORAL}/fixedcolumns',
    FieldType.HEADING.value: f'{CORAL}/heading',
    FieldType.TEXT.value: f'{CORAL}/text',
    FieldType.ALERT.value: f'{CORAL}/alert',
    FieldType.TAGS.value: 'cq/gui/components/coral/common/form/tagfield',
    FieldType.IMAGE.value: 'cq/gui/components/authoring/dialog/fileupload',
    FieldType.AUTOCOMPLETE.value: f'{CORAL}/form/autocomplete',
    FieldType.RADIOGROUP.value: f'{CORAL}/form/radiogroup',
    FieldType.PAGEFIELD.value: 'cq/gui/components/siteadmin/admin/searchpanel/searchpredicates/pathpredicate',
    FieldType.CONTENTFRAGMENTPICKER.value: 'dam/cfm/components/authoring/contentfragment',
    FieldType.EXPERIENCEFRAGMENTPICKER.value: 'cq/experience-fragments/editor/components/experiencefragment',
    FieldType.ASSETPICKER.value: f'{CORAL}/form/pathfield',
    FieldType.RTE.value: 'cq/gui/components/authoring/dialog/richtext',
    FieldType.BUTTON.value: f'{CORAL}/button',
}

TABS_RESOURCE_TYPE = f'{CORAL}/tabs'
ACCORDION_RESOURCE_TYPE = f'{CORAL}/accordion'
DIALOG_RESOURCE_TYPE = 'cq/gui/components/authoring/dialog'
RENDER_CONDITION_PREFIX = f'{CORAL}/renderconditions'


def get_resource_type(field_type: str) -> str:
    """Resource type for a field kind; unknown kinds render as textfields."""
    return RESOURCE_TYPES.get(field_type, RESOURCE_TYPES[FieldType.TEXTFIELD.value])


# ── Dialog Root ──────────────────────────────────────────────────────────

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?>'

ROOT_NAMESPACES: list[list[str]] = [
    [
        'xmlns:sling="http://sling.apache.org/jcr/sling/1.0"',
        'xmlns:jcr="http://www.jcp.org/jcr/1.0"',
    ],
    [
        'xmlns:nt="http://www.jcp.org/jcr/nt/1.0"',
        'xmlns:cq="http://www.day.com/jcr/cq/1.0"',
    ],
    ['xmlns:granite="http://www.adobe.com/jcr/granite/1.0"'],
]

# ── Show/Hide ────────────────────────────────────────────────────────────

SHOWHIDE_MARKER_CLASSES: dict[str, str] = {
    FieldType.SELECT.value: 'cq-dialog-dropdown-showhide',
    FieldType.CHECKBOX.value: 'cq-dialog-checkbox-showhide',
}

# ── Defaults for specialized fields ──────────────────────────────────────

DEFAULT_IMAGE_MIME_TYPES = [
    'image/gif', 'image/jpeg', 'image/png', 'image/webp', 'image/tiff', 'image/svg+xml',
]

DEFAULT_ROOT_PATHS: dict[str, str] = {
    FieldType.TAGS.value: '/content/cq:tags',
    FieldType.PAGEFIELD.value: '/content',
    FieldType.CONTENTFRAGMENTPICKER.value: '/content/dam',
    FieldType.EXPERIENCEFRAGMENTPICKER.value: '/content/experience-fragments',
    FieldType.ASSETPICKER.value: '/content/dam',
}

DEFAULT_HEADING_LEVEL = 3
DEFAULT_BUTTON_VARIANT = 'primary'

# ── Rich Text Editor ─────────────────────────────────────────────────────

RTE_INLINE_TOOLBAR = [
    'format#bold', 'format#italic', 'format#underline', '#justify', '#lists',
    'links#modifylink', 'links#unlink', 'fullscreen#start',
]

RTE_INLINE_POPOVERS = [
    'justify#justifleft', 'justify#justifycenter', 'justify#justifyright',
    'lists#unordered', 'lists#ordered', 'links#link',
]

# Plugin family and the feature it enables, per requested RTE feature
RTE_FEATURE_PLUGINS: dict[str, tuple[str, str]] = {
    'bold': ('format', 'bold'),
    'italic': ('format', 'italic'),
    'underline': ('format', 'underline'),
    'links': ('links', 'modifylink,unlink'),
    'lists': ('lists', '*'),
    'justify': ('justify', '*'),
    'subsuperscript': ('subsuperscript', '*'),
    'paraformat': ('paraformat', '*'),
}

RTE_DEFAULT_PLUGINS: list[tuple[str, str]] = [
    ('format', 'bold,italic,underline'),
    ('justify', '*'),
    ('lists', '*'),
    ('links', 'modifylink,unlink'),
    ('subsuperscript', '*'),
    ('paraformat', '*'),
]

RTE_PARAGRAPH_FORMATS: list[tuple[str, str, str]] = [
    ('default', 'Paragraph', 'p'),
    ('h1', 'Heading 1', 'h1'),
    ('h2', 'Heading 2', 'h2'),
    ('h3', 'Heading 3', 'h3'),
]

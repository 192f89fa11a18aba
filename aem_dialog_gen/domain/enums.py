"""Domain enums for the dialog generator."""
from enum import Enum


class FieldType(Enum):
    """Field kinds understood by the generator registry."""
    TEXTFIELD = "textfield"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    NUMBERFIELD = "numberfield"
    PATHFIELD = "pathfield"
    COLORFIELD = "colorfield"
    DATEPICKER = "datepicker"
    HIDDEN = "hidden"
    SWITCH = "switch"
    FILEUPLOAD = "fileupload"
    MULTIFIELD = "multifield"
    FIELDSET = "fieldset"
    CONTAINER = "container"
    WELL = "well"
    FIXEDCOLUMNS = "fixedcolumns"
    HEADING = "heading"
    TEXT = "text"
    ALERT = "alert"
    TAGS = "tags"
    IMAGE = "image"
    AUTOCOMPLETE = "autocomplete"
    RADIOGROUP = "radiogroup"
    PAGEFIELD = "pagefield"
    CONTENTFRAGMENTPICKER = "contentfragmentpicker"
    EXPERIENCEFRAGMENTPICKER = "experiencefragmentpicker"
    ASSETPICKER = "assetpicker"
    RTE = "rte"
    BUTTON = "button"


class Layout(Enum):
    """Top-level dialog layouts."""
    TABS = "tabs"
    SIMPLE = "simple"
    ACCORDION = "accordion"


class RenderConditionType(Enum):
    SIMPLE = "simple"
    PRIVILEGE = "privilege"
    AND = "and"
    OR = "or"

"""Attribute names accepted by edit, rename and set."""

from enum import Enum


class EditableField(Enum):
    """Fields of a log entry that edit can overwrite."""

    SECTOR = "sector"
    PROJECT = "project"
    DESCRIPTION = "description"
    START = "start"
    END = "end"

    @property
    def is_boundary(self) -> bool:
        return self in (EditableField.START, EditableField.END)

    @classmethod
    def from_alias(cls, alias: str | None) -> "EditableField | None":
        if alias is None:
            return None
        return _FIELD_ALIASES.get(alias.lower())


_FIELD_ALIASES = {
    "sec": EditableField.SECTOR,
    "sector": EditableField.SECTOR,
    "pro": EditableField.PROJECT,
    "project": EditableField.PROJECT,
    "title": EditableField.PROJECT,
    "desc": EditableField.DESCRIPTION,
    "dsc": EditableField.DESCRIPTION,
    "description": EditableField.DESCRIPTION,
    "start": EditableField.START,
    "end": EditableField.END,
}


class RenameCategory(Enum):
    """Label families that rename can rewrite across the log."""

    SECTOR = "sector"
    PROJECT = "project"

    @classmethod
    def from_alias(cls, alias: str | None) -> "RenameCategory | None":
        if alias is None:
            return None
        return _CATEGORY_ALIASES.get(alias.lower())


_CATEGORY_ALIASES = {
    "sector": RenameCategory.SECTOR,
    "sec": RenameCategory.SECTOR,
    "project": RenameCategory.PROJECT,
    "pro": RenameCategory.PROJECT,
}


class SettingKey(Enum):
    """Interface settings that set can change."""

    BACKGROUND = "background"
    COLOUR = "colour"
    ACCENT = "accent"
    FONT = "font"
    VIEW = "view"
    CALENDAR = "calendar"
    TIME_FORMAT = "time_format"
    DATE_FORMAT = "date_format"
    WEEK_START = "week_start"
    SECTOR_COLOUR = "sector_colour"
    PROJECT_COLOUR = "project_colour"
    COLOUR_MODE = "colour_mode"

    @classmethod
    def from_alias(cls, alias: str | None) -> "SettingKey | None":
        if alias is None:
            return None
        return _SETTING_ALIASES.get(alias.lower())


_SETTING_ALIASES = {
    "background": SettingKey.BACKGROUND,
    "bg": SettingKey.BACKGROUND,
    "color": SettingKey.COLOUR,
    "colour": SettingKey.COLOUR,
    "text": SettingKey.COLOUR,
    "highlight": SettingKey.ACCENT,
    "accent": SettingKey.ACCENT,
    "font": SettingKey.FONT,
    "typeface": SettingKey.FONT,
    "type": SettingKey.FONT,
    "view": SettingKey.VIEW,
    "cal": SettingKey.CALENDAR,
    "calendar": SettingKey.CALENDAR,
    "timeformat": SettingKey.TIME_FORMAT,
    "time": SettingKey.TIME_FORMAT,
    "dateformat": SettingKey.DATE_FORMAT,
    "date": SettingKey.DATE_FORMAT,
    "weekstart": SettingKey.WEEK_START,
    "category": SettingKey.SECTOR_COLOUR,
    "sector": SettingKey.SECTOR_COLOUR,
    "cat": SettingKey.SECTOR_COLOUR,
    "sec": SettingKey.SECTOR_COLOUR,
    "project": SettingKey.PROJECT_COLOUR,
    "pro": SettingKey.PROJECT_COLOUR,
    "colourmode": SettingKey.COLOUR_MODE,
    "colormode": SettingKey.COLOUR_MODE,
}

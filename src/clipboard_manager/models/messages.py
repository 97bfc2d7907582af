"""
clipboard_manager.models.messages

User-visible notification and empty-state strings, with one catalogue per language.
Placeholders use `str.format` names (`{index}`, `{capacity}`).
"""

from pydantic import BaseModel, ConfigDict, Field

from ..constants import SUPPORTED_LANGUAGES


class Messages(BaseModel):
    saved: str = Field("Clipboard content saved!")
    read_failed: str = Field("Clipboard empty or inaccessible. Check clipboard permissions.")
    nothing_to_save: str = Field("Nothing to save: the text is empty.")
    copied: str = Field("Copied to clipboard!")
    copy_failed: str = Field("Failed to copy to clipboard.")
    deleted: str = Field("Item deleted.")
    invalid_index: str = Field("No saved item at position {index}.")
    capacity_changed: str = Field("Keeping up to {capacity} item(s).")
    invalid_capacity: str = Field("Capacity must be a whole number of at least 1.")
    cleared: str = Field("All saved items removed.")
    empty_list: str = Field("No saved items")

    model_config = ConfigDict(frozen=True)


MESSAGE_CATALOGUES: dict[str, Messages] = {
    "en": Messages(),
    "zh": Messages(
        saved="剪贴板内容已保存！",
        read_failed="无法访问剪贴板或剪贴板为空。请检查浏览器权限。",
        nothing_to_save="没有可保存的内容。",
        copied="已复制到剪贴板！",
        copy_failed="复制到剪贴板失败",
        deleted="项目已删除。",
        invalid_index="位置 {index} 没有保存的项目。",
        capacity_changed="最多保存 {capacity} 个项目。",
        invalid_capacity="容量必须是不小于 1 的整数。",
        cleared="已清空所有保存的项目。",
        empty_list="没有保存的项目",
    ),
}


def get_messages(language: str = "en") -> Messages:
    """Return the catalogue for `language`, falling back to English."""
    if language not in SUPPORTED_LANGUAGES:
        return MESSAGE_CATALOGUES["en"]
    return MESSAGE_CATALOGUES[language]

"""Demo import configuration schema."""

from pydantic import Field, field_validator

from themecore.application.config.schemas.base import OpenEntryModel, SliceModel


class ImportFileConfig(OpenEntryModel):
    """Import file descriptor handed to the import plugin.

    Other plugin keys (``local_import_file``, ``local_import_widget_file``,
    ``local_import_customizer_file``, ``import_preview_image_url``,
    ``import_notice``, ...) pass through.
    """

    import_file_name: str = Field(..., min_length=1)


class MenuConfig(SliceModel):
    menu_name: str = Field(..., min_length=1)
    menu_location: str = Field(..., min_length=1)


class DemoImportConfig(SliceModel):
    """Demo import.

    Attributes:
        import_settings: Import file descriptor.
        page_settings: Option name to page title (``show_on_front`` verbatim).
        menu_settings: Menus to assign to locations after import.
    """

    import_settings: ImportFileConfig | None = None
    page_settings: dict[str, str] = Field(default_factory=dict)
    menu_settings: list[MenuConfig] | dict[str, MenuConfig] = Field(default_factory=dict)

    @field_validator("import_settings", mode="before")
    @classmethod
    def not_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("omit the key instead of setting it to null")
        return value

"""Pydantic schemas for theme configuration slices.

One model per component id. A slice is validated against its model and then
handed to the component unchanged.
"""

from pydantic import BaseModel

from themecore.application.config.schemas.assets_schema import (
    AssetLoaderConfig,
    LocalizeConfig,
    ScriptConfig,
    StyleConfig,
)
from themecore.application.config.schemas.base import (
    CallbackValue,
    DynamicString,
    GuardValue,
    OpenEntryModel,
    SliceModel,
)
from themecore.application.config.schemas.content_schema import (
    BreadcrumbsConfig,
    HeroSectionConfig,
    PageLayoutsConfig,
    PageTemplateConfig,
)
from themecore.application.config.schemas.customizer_schema import (
    ColorConfig,
    ColorOutputConfig,
    CustomColorsConfig,
    CustomizerConfig,
    CustomizerFieldConfig,
    CustomizerObjectConfig,
    KirkiConfig,
    KirkiFieldConfig,
)
from themecore.application.config.schemas.import_schema import (
    DemoImportConfig,
    ImportFileConfig,
    MenuConfig,
)
from themecore.application.config.schemas.root import ThemeConfiguration
from themecore.application.config.schemas.setup_schema import (
    ConstantsConfig,
    GenesisSettingsConfig,
    HookConfig,
    HooksConfig,
    TextDomainConfig,
    ThemeSupportConfig,
)
from themecore.application.config.schemas.widgets_schema import (
    WidgetAreaConfig,
    WidgetAreaEntryConfig,
    WidgetsConfig,
)

COMPONENT_SCHEMAS: dict[str, type[BaseModel]] = {
    "asset_loader": AssetLoaderConfig,
    "breadcrumbs": BreadcrumbsConfig,
    "constants": ConstantsConfig,
    "custom_colors": CustomColorsConfig,
    "customizer": CustomizerConfig,
    "demo_import": DemoImportConfig,
    "genesis_settings": GenesisSettingsConfig,
    "hero_section": HeroSectionConfig,
    "hooks": HooksConfig,
    "kirki": KirkiConfig,
    "page_layouts": PageLayoutsConfig,
    "page_template": PageTemplateConfig,
    "text_domain": TextDomainConfig,
    "theme_support": ThemeSupportConfig,
    "widget_area": WidgetAreaConfig,
    "widgets": WidgetsConfig,
}

__all__ = [
    "COMPONENT_SCHEMAS",
    "AssetLoaderConfig",
    "BreadcrumbsConfig",
    "CallbackValue",
    "ColorConfig",
    "ColorOutputConfig",
    "ConstantsConfig",
    "CustomColorsConfig",
    "CustomizerConfig",
    "CustomizerFieldConfig",
    "CustomizerObjectConfig",
    "DemoImportConfig",
    "DynamicString",
    "GenesisSettingsConfig",
    "GuardValue",
    "HeroSectionConfig",
    "HookConfig",
    "HooksConfig",
    "ImportFileConfig",
    "KirkiConfig",
    "KirkiFieldConfig",
    "LocalizeConfig",
    "MenuConfig",
    "OpenEntryModel",
    "PageLayoutsConfig",
    "PageTemplateConfig",
    "ScriptConfig",
    "SliceModel",
    "StyleConfig",
    "TextDomainConfig",
    "ThemeConfiguration",
    "ThemeSupportConfig",
    "WidgetAreaConfig",
    "WidgetAreaEntryConfig",
    "WidgetsConfig",
]

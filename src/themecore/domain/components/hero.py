"""Hero section replacing the default page and archive headings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from ..callbacks import return_false, return_none
from ..services.markup import markup
from ..services.text import esc_attr, esc_html, humanize
from .base import ThemeComponent
from .registry import component_registry

if TYPE_CHECKING:
    from themecore.contracts.host import Host
    from themecore.domain.value_objects import Post

logger = logging.getLogger(__name__)

FEATURE = "hero-section"
META_KEY = "_hero_section"
NONCE_NAME = "hero_section_nonce"
NONCE_ACTION = "hero_section_nonce_action"
HOOK = "child_theme_hero_section"

BLOG_TEMPLATE = "page_blog.php"
LANDING_TEMPLATE = "/resources/views/page-landing.php"

# Per-post override choices shown in the meta box
CHOICES: tuple[str, ...] = ("featured_image", "default_image", "no_image", "disable")

SCREENS: list[str] = ["post", "page", "product", "portfolio"]

SUBTITLE = '<p class="entry-subtitle" itemprop="description">%s</p>'


def _latest_posts(host: Host) -> bool:
    return bool(host.query("is_home")) and host.get_option("show_on_front") == "posts"


# Page types a hero section can be enabled for, in evaluation order.
CONDITIONS: dict[str, Callable[[Host], bool]] = {
    "page": lambda host: bool(
        host.query("is_singular", "page")
        and not host.query("is_page_template", BLOG_TEMPLATE)
        and not host.query("is_page_template", LANDING_TEMPLATE)
    ),
    "post": lambda host: bool(host.query("is_singular", "post")),
    "product": lambda host: bool(host.query("is_singular", "product")),
    "portfolio-item": lambda host: bool(host.query("is_singular", "portfolio")),
    "front-page": lambda host: bool(host.query("is_front_page")),
    "attachment": lambda host: bool(host.query("is_attachment")),
    "landing-page": lambda host: bool(host.query("is_page_template", LANDING_TEMPLATE)),
    "blog-template": lambda host: bool(host.query("is_page_template", BLOG_TEMPLATE)),
    "error-404": lambda host: bool(host.query("is_404")),
    "search": lambda host: bool(host.query("is_search")),
    "author": lambda host: bool(host.query("is_author")),
    "date": lambda host: bool(host.query("is_date")),
    "latest-posts": _latest_posts,
    "blog": lambda host: bool(host.query("is_home")),
    "shop": lambda host: bool(host.query("is_shop")),
    "portfolio": lambda host: bool(host.query("is_post_type_archive", "portfolio")),
    "portfolio-type": lambda host: bool(host.query("is_tax", "portfolio-type")),
    "product-archive": lambda host: bool(host.query("is_tax", ["product_cat", "product_tag"])),
    "category": lambda host: bool(host.query("is_category")),
    "tag": lambda host: bool(host.query("is_tag")),
}

# Default headings the hero section takes over: (event, host function, priority)
_REPLACED_HEADINGS: tuple[tuple[str, str, int], ...] = (
    ("genesis_entry_header", "genesis_entry_header_markup_open", 5),
    ("genesis_entry_header", "genesis_entry_header_markup_close", 15),
    ("genesis_before_loop", "genesis_do_posts_page_heading", 10),
    ("genesis_archive_title_descriptions", "genesis_do_archive_headings_open", 5),
    ("genesis_archive_title_descriptions", "genesis_do_archive_headings_close", 15),
    ("genesis_before_loop", "genesis_do_date_archive_title", 10),
    ("genesis_before_loop", "genesis_do_blog_template_heading", 10),
    ("genesis_before_loop", "genesis_do_taxonomy_title_description", 15),
    ("genesis_before_loop", "genesis_do_author_title_description", 15),
    ("genesis_before_loop", "genesis_do_cpt_archive_title_description", 10),
    ("genesis_before_loop", "genesis_do_search_title", 10),
    ("woocommerce_single_product_summary", "woocommerce_template_single_title", 5),
    ("woocommerce_before_shop_loop", "woocommerce_result_count", 20),
)

# Archive headings re-rendered inside the hero section
_HERO_HEADINGS: tuple[str, ...] = (
    "genesis_do_posts_page_heading",
    "genesis_do_date_archive_title",
    "genesis_do_taxonomy_title_description",
    "genesis_do_author_title_description",
    "genesis_do_cpt_archive_title_description",
)


@component_registry.register("hero_section")
class HeroSection(ThemeComponent):
    """Render a hero section with the page title and subtitle.

    Configuration keys:
        enable: Mapping of page type (see ``CONDITIONS``) to a flag.

    For every enabled page type the component checks, on ``genesis_meta``,
    whether the current request is of that type, whether the theme still
    supports the feature and whether the post opted out through its meta
    box. When all hold, the default headings are unhooked and the hero
    section is hooked in before the content.
    """

    def setup(self) -> None:
        enable = self.config.get("enable", {})
        unknown = sorted(set(enable) - set(CONDITIONS))
        if unknown:
            raise ValueError(f"Unknown hero section page types: {', '.join(unknown)}")

        self.host.add_theme_support(FEATURE)
        self.add_action("add_meta_boxes", self.add_meta_box)
        self.add_action("save_post", self.save_meta_box)

        for page_type, enabled in enable.items():
            self.add_action("genesis_meta", self._activator(page_type, enabled), 100)

    def _activator(self, page_type: str, enabled: bool) -> Callable[..., None]:
        def activate(*args: Any) -> None:
            if self.is_enabled(enabled, page_type):
                self.host.add_filter("body_class", self.body_class)
                self.hook_hero()

        return activate

    def is_enabled(self, enabled: bool, page_type: str) -> bool:
        if not enabled:
            return False
        if not CONDITIONS[page_type](self.host):
            return False
        if not self.host.current_theme_supports(FEATURE):
            return False
        post = self.host.current_post()
        post_id = post.id if post is not None else None
        if self.host.get_post_meta(post_id, META_KEY) == "disable":
            logger.debug(f"Hero section disabled for post {post_id}")
            return False
        return True

    def body_class(self, classes: list[str]) -> list[str]:
        return [*classes, "has-hero-section"]

    def hook_hero(self) -> None:
        """Swap the default headings for the hero section."""
        host = self.host
        if host.query("is_admin") or host.query("is_front_page"):
            return

        if host.query("is_singular") and not host.query("is_page_template", BLOG_TEMPLATE):
            host.remove_action("genesis_entry_header", "genesis_do_post_title")

        for event, function, priority in _REPLACED_HEADINGS:
            host.remove_action(event, function, priority)

        host.add_filter("woocommerce_show_page_title", return_none)
        host.add_filter("genesis_search_title_output", return_false)

        for function in _HERO_HEADINGS:
            host.add_action(HOOK, function)
        host.add_action(HOOK, self.title, 10)
        host.add_action(HOOK, self.excerpt, 20)
        host.add_action("be_title_toggle_remove", self.title_toggle)
        host.add_action("genesis_before_content", self.remove_404_title)
        host.add_action("genesis_before_content_sidebar_wrap", self.attributes)
        host.add_action("genesis_before_content_sidebar_wrap", self.display)

    def remove_404_title(self, *args: Any) -> None:
        if self.host.query("is_404"):
            for part in ("open", "content", "close"):
                self.host.add_filter(f"genesis_markup_entry-title_{part}", return_false)

    def title_toggle(self, *args: Any) -> None:
        self.host.remove_action(HOOK, self.title, 10)
        self.host.remove_action(HOOK, self.excerpt, 20)

    def title(self, *args: Any) -> None:
        host = self.host
        if host.query("is_shop"):
            shop = host.get_post(host.get_option("woocommerce_shop_page_id"))
            self._heading(shop.title if shop is not None else "")
        elif _latest_posts(host):
            self._heading(host.apply_filters("child_theme_latest_posts_title", "Latest Posts"))
        elif host.query("is_404"):
            self._heading(host.apply_filters("genesis_404_entry_title", "Not found, error 404"))
        elif host.query("is_search"):
            text = "Search results for: " + str(host.query("get_search_query") or "")
            self._heading(host.apply_filters("genesis_search_title_text", text))
        elif host.query("is_page_template", BLOG_TEMPLATE):
            post = host.current_post()
            title = post.title if post is not None else ""
            host.do_action("genesis_archive_title_descriptions", title, "", "posts-page-description")
        elif host.query("is_singular"):
            host.call("genesis_do_post_title")

    def _heading(self, content: str) -> None:
        markup(
            self.host,
            open="<h1 %s>",
            close="</h1>",
            content=esc_html(content),
            context="entry-title",
        )

    def excerpt(self, *args: Any) -> None:
        host = self.host
        if host.query("is_shop"):
            host.call("woocommerce_result_count")
        elif _latest_posts(host):
            text = host.apply_filters("child_theme_latest_posts_excerpt", "Showing the latest posts")
            host.output(SUBTITLE % esc_html(text))
        elif host.query("is_search"):
            self._page_subtitle(host.get_page_by_path("search"))
        elif host.query("is_404"):
            self._page_subtitle(host.get_page_by_path("error"))
        elif host.query("is_singular") and not host.query("is_singular", "product"):
            self._page_subtitle(host.current_post())

    def _page_subtitle(self, post: Post | None) -> None:
        if post is not None and post.has_excerpt:
            self.host.output(SUBTITLE % self.host.call("do_shortcode", post.excerpt))

    def display(self, *args: Any) -> None:
        markup(self.host, open='<section %s><div class="wrap">', context="hero-section")
        self.host.do_action(HOOK)
        markup(self.host, close="</div></section>", context="hero-section")

    def attributes(self, *args: Any) -> None:
        self.host.add_filter("genesis_attr_entry", self.entry_attributes)
        self.host.add_filter("genesis_attr_hero-section", self.hero_attributes)

    def entry_attributes(self, atts: dict[str, Any]) -> dict[str, Any]:
        if self.host.query("is_singular"):
            return {**atts, "itemref": "hero-section"}
        return atts

    def hero_attributes(self, atts: dict[str, Any]) -> dict[str, Any]:
        return {**atts, "id": "hero-section", "role": "banner"}

    # -------------------------------------------------------------------------
    # Per-post meta box
    # -------------------------------------------------------------------------

    def add_meta_box(self, *args: Any) -> None:
        self.host.add_meta_box(
            "hero-section", "Hero Section", self.render_meta_box, SCREENS, "side", "low"
        )

    def save_meta_box(self, post_id: int, *args: Any) -> int:
        """Store the submitted hero section choice for ``post_id``.

        Nothing is saved without a valid nonce, during autosave, or when
        the current user cannot edit the post.
        """
        host = self.host
        data = host.request_data()
        if NONCE_NAME not in data:
            return post_id
        if not host.verify_nonce(data[NONCE_NAME], NONCE_ACTION):
            logger.debug(f"Rejected hero section save for post {post_id}: bad nonce")
            return post_id
        if host.query("doing_autosave"):
            return post_id

        capability = "edit_page" if data.get("post_type") == "page" else "edit_post"
        if not host.current_user_can(capability, post_id):
            return post_id

        choice = data.get("hero_section")
        if choice in CHOICES:
            host.update_post_meta(post_id, META_KEY, choice)
        return post_id

    def render_meta_box(self, post: Post) -> None:
        value = self.host.get_post_meta(post.id, META_KEY)
        html = ""
        for choice in CHOICES:
            checked = ' checked="checked"' if value == choice else ""
            html += (
                f'<label for="hero_section_{choice}">'
                f'<input type="radio" name="hero_section" id="hero_section_{choice}" '
                f'value="{choice}"{checked}> {humanize(choice)}</label><br>'
            )
        html += self.host.nonce_field(NONCE_ACTION, NONCE_NAME)
        self.host.output(html)


def custom_header(host: Host) -> str:
    """Print the hero background image style for the current request.

    Used as the ``wp-head-callback`` of the ``custom-header`` feature. The
    image comes from the page standing in for the current view (shop page,
    archive attachment, front or posts page, ...) and is overridden by
    that page's hero section meta choice.

    Returns:
        The printed ``<style>`` block, or an empty string.
    """
    source: Post | int | None = None
    if host.query("is_shop"):
        source = host.get_option("woocommerce_shop_page_id")
    elif host.query("is_post_type_archive"):
        page = host.get_page_by_path(host.query("get_query_var", "post_type"))
        source = page if page is not None and page.thumbnail_url else None
    elif host.query("is_category"):
        source = host.get_page_by_title(
            "category-" + str(host.query("get_query_var", "category_name")), "attachment"
        )
    elif host.query("is_tag"):
        source = host.get_page_by_title("tag-" + str(host.query("get_query_var", "tag")), "attachment")
    elif host.query("is_tax"):
        source = host.get_page_by_title("term-" + str(host.query("get_query_var", "term")), "attachment")
    elif host.query("is_front_page"):
        source = host.get_option("page_on_front")
    elif host.get_option("show_on_front") == "posts" and host.query("is_home"):
        source = host.get_option("page_for_posts")
    elif host.query("is_search"):
        source = host.get_page_by_path("search")
    elif host.query("is_404"):
        source = host.get_page_by_path("error")
    elif host.query("is_singular"):
        current = host.current_post()
        source = current.id if current is not None else None

    if isinstance(source, (int, str)):
        post = host.get_post(int(source)) if source else None
    else:
        post = source
    url = post.thumbnail_url if post is not None else None

    setting = host.get_post_meta(post.id if post is not None else None, META_KEY)
    if setting == "default_image":
        url = host.get_theme_mod("header_image")
    elif setting in ("disable", "no_image"):
        url = None

    if not url:
        return ""

    selector = host.get_theme_support("custom-header", "header-selector")
    style = (
        f'<style type="text/css">{esc_attr(selector)}'
        f"{{background-image:url({esc_attr(url)})}}</style>\n"
    )
    host.output(style)
    return style

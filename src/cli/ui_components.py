"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- One renderable per record type, reused by `show` and `inspect`.
"""

from __future__ import annotations

from typing import Any

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from core.catalog import EndpointSpec
from core.domain.models import Post, ServerMessage, TagList, UserPage, UserProfile
from core.services.screen import ViewState, ViewStatus


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Disabled in non-interactive modes (exports, pipes).
    """

    title = Text("JSON-SHAPES", style="bold cyan")
    subtitle = Text("Decode • Map • Render", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_endpoints_table(specs: list[EndpointSpec]) -> Table:
    table = Table(title="Example endpoints")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Path", style="magenta")
    table.add_column("Shape", style="white")
    table.add_column("Description", style="dim")
    for spec in specs:
        table.add_row(spec.name, spec.path, spec.shape.label(), spec.description)
    return table


def build_message_panel(message: ServerMessage) -> Panel:
    body = Text()
    body.append(message.message + "\n\n")
    body.append(f"at {message.time.isoformat()}", style="dim")
    return Panel(body, title=Text("Message", style="bold green"), border_style="green")


def build_posts_table(posts: list[Post]) -> Table:
    table = Table(title="Posts")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("User", style="magenta", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Body", style="white")
    for post in posts:
        table.add_row(str(post.id), str(post.user_id), post.title, post.body)
    return table


def build_users_table(page: UserPage) -> Table:
    caption_style = "green" if page.is_success else "yellow"
    table = Table(
        title="Users",
        caption=f"status: {page.status} • count: {page.count} • page: {page.page}",
        caption_style=caption_style,
    )
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Email", style="magenta")
    for user in page.users:
        table.add_row(str(user.id), user.name, user.email)
    return table


def build_tags_text(tags: TagList) -> Text:
    text = Text()
    for i, tag in enumerate(tags):
        if i:
            text.append(" ")
        text.append(f" {tag} ", style="black on cyan")
    return text


def build_profile_panel(profile: UserProfile) -> Panel:
    tree = Tree(Text(profile.name, style="bold"))
    tree.add(f"id: {profile.id}")
    tree.add(f"email: {profile.email}")

    address = tree.add("address")
    address.add(f"street: {profile.address.street}")
    address.add(f"city: {profile.address.city}")
    address.add(f"zipcode: {profile.address.zipcode}")
    if profile.address.geo:
        address.add(f"geo: {profile.address.geo.lat}, {profile.address.geo.lng}")

    company = tree.add("company")
    company.add(f"name: {profile.company.name}")
    company.add(Text(profile.company.catch_phrase, style="italic"))

    if profile.skills:
        skills = tree.add("skills")
        for skill in profile.skills:
            skills.add(skill)

    return Panel(tree, title=Text("Profile", style="bold blue"), border_style="blue")


def render_record(record: Any) -> RenderableType:
    """Pick the renderable for a typed record (or list of records)."""

    if isinstance(record, ServerMessage):
        return build_message_panel(record)
    if isinstance(record, UserPage):
        return build_users_table(record)
    if isinstance(record, TagList):
        return build_tags_text(record)
    if isinstance(record, UserProfile):
        return build_profile_panel(record)
    if isinstance(record, list) and all(isinstance(item, Post) for item in record):
        return build_posts_table(record)
    return Text(repr(record))


def build_error_panel(message: str) -> Panel:
    return Panel(Text(message, style="bold red"), title=Text("Error", style="red"), border_style="red")


def render_state(state: ViewState) -> RenderableType:
    """Data when the screen loaded, the generic error otherwise."""

    if state.status is ViewStatus.FAILED:
        return build_error_panel(state.error or "Failed to load data.")
    if state.status is ViewStatus.LOADING:
        return Text("Loading…", style="dim")

    header = Text.assemble(
        (state.endpoint.name, "bold cyan"),
        "  ",
        (state.endpoint.shape.label(), "dim"),
    )
    return Group(header, render_record(state.data))

"""CLI entry point for nestbox. Uses Click for argument parsing."""

from __future__ import annotations

import logging

import click
from click.shell_completion import get_completion_class

from nestbox import __version__
from nestbox.color_theme import COLOR_THEMES, ColorTheme
from nestbox.colors import parse_color
from nestbox.config import BoxConfig, ConfigError, build_config
from nestbox.glyphs import GLYPH_SETS, get_glyph_set
from nestbox.nest import nest_boxes
from nestbox.source import InputReadError, NoInputError, resolve_text_input

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _print_completion(ctx: click.Context, param: click.Parameter, shell: str | None) -> None:
    """Print the shell-completion script for *shell* and exit."""
    if not shell or ctx.resilient_parsing:
        return
    comp_cls = get_completion_class(shell)
    if comp_cls is None:
        raise click.BadParameter(f"unsupported shell {shell!r}", ctx=ctx, param=param)
    prog_name = ctx.find_root().info_name or "box"
    complete_var = f"_{prog_name.replace('-', '_').upper()}_COMPLETE"
    click.echo(comp_cls(ctx.command, {}, prog_name, complete_var).source())
    ctx.exit()


def render(lines: list[str], config: BoxConfig) -> list[str]:
    """Draw the boxes described by *config* around *lines*."""
    color_theme = ColorTheme(config.mode) if config.mode else None
    return nest_boxes(
        lines,
        config.depth,
        border_colors=config.border_colors,
        title_colors=config.title_colors,
        titles=config.titles,
        glyphs=get_glyph_set(config.theme),
        vpad=config.vpad,
        hpad=config.hpad,
        content_color=parse_color(config.content_color),
        color_theme=color_theme,
        wide=config.wide,
    )


@click.command(
    "box",
    context_settings={
        "auto_envvar_prefix": "BOX",
        "help_option_names": ["-h", "--help"],
    },
    epilog="""\b
Examples:
  echo "Hello, world!" | box -t "My Title"
  echo "Hello, world!" | box -t "My Title" -b red -c blue -n 2
  box "Hello, world!" -t "My Title"
  box "Line 1" "Line 2" "Line 3"
""",
)
@click.argument("text", nargs=-1)
@click.option("-n", "--number", type=click.IntRange(min=0), default=1, show_default=True,
              help="Number of nested boxes")
@click.option("-t", "--title", default="", help="Box titles (comma-separated)")
@click.option("-b", "--box-color", default="", help="Box border colors (comma-separated)")
@click.option("-c", "--title-color", default="", help="Title colors (comma-separated)")
@click.option("-C", "--center-color", default="", help="Center text color")
@click.option("-v", "--vpadding", type=click.IntRange(min=0), default=0, help="Vertical padding")
@click.option("-H", "--hpadding", type=click.IntRange(min=0), default=0, help="Horizontal padding")
@click.option("-T", "--theme", type=click.Choice(sorted(GLYPH_SETS), case_sensitive=False),
              default="unicode", show_default=True, help="Border glyph theme")
@click.option("-m", "--mode", default="",
              help=f"Color mode ({', '.join(COLOR_THEMES)})")
@click.option("-w", "--wide", is_flag=True,
              help="Measure widths in terminal columns (wide CJK characters count twice)")
@click.option("--color/--no-color", default=None,
              help="Force or suppress color output (default: only on a terminal)")
@click.option("--log-level", type=click.Choice(["debug", "info", "warning", "error"]),
              default="warning", show_default=True)
@click.option("--completion", type=click.Choice(["bash", "zsh", "fish"]), expose_value=False,
              is_eager=True, hidden=True, allow_from_autoenv=False, callback=_print_completion,
              help="Print a shell-completion script")
@click.version_option(__version__, prog_name="box")
@click.pass_context
def main(
    ctx: click.Context,
    text: tuple[str, ...],
    number: int,
    title: str,
    box_color: str,
    title_color: str,
    center_color: str,
    vpadding: int,
    hpadding: int,
    theme: str,
    mode: str,
    wide: bool,
    color: bool | None,
    log_level: str,
) -> None:
    """Create boxes around text.

    Box draws one or more nested borders around lines read from stdin or
    given as arguments. It supports several themes, colors and padding.
    """
    logging.basicConfig(level=getattr(logging, log_level.upper()), format=LOG_FORMAT)

    try:
        config = build_config(
            depth=number,
            title=title,
            box_color=box_color,
            title_color=title_color,
            center_color=center_color,
            vpad=vpadding,
            hpad=hpadding,
            theme=theme,
            mode=mode,
            wide=wide,
        )
    except ConfigError as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    try:
        lines = resolve_text_input(text, click.get_text_stream("stdin"))
    except NoInputError as e:
        click.echo(ctx.get_usage(), err=True)
        click.echo(f"\nError: {e}", err=True)
        ctx.exit(1)
    except InputReadError as e:
        raise click.ClickException(str(e)) from e

    logger.debug("Rendering %d line(s) with %r", len(lines), config)
    for line in render(lines, config):
        click.echo(line, color=color)


if __name__ == "__main__":
    main()

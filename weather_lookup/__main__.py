# ABOUTME: Terminal entry point: look up weather by free text, by suggestion, or by current location.
# ABOUTME: Wires Settings, the shared httpx client, SearchBar and WeatherPage, then renders with rich.

import argparse
import asyncio
import logging
import sys

from rich.console import Console

from weather_lookup.config import load_settings
from weather_lookup.deps import LookupDeps, create_http_client
from weather_lookup.errors import ConfigError
from weather_lookup.geolocation import GeolocationPipeline
from weather_lookup.models import PositionOptions
from weather_lookup.page import PageView, WeatherPage
from weather_lookup.position import FixedPositionProvider, IPGeolocationProvider
from weather_lookup.render import render_geo_error, render_page, render_suggestions
from weather_lookup.search_bar import SearchBar
from weather_lookup.suggestions import SuggestionPipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weather_lookup", description="Current weather and 24-hour forecast.")
    parser.add_argument("location", nargs="?", help="free-text location, e.g. 'Curitiba'")
    parser.add_argument("--suggest", metavar="TEXT", help="list city suggestions for TEXT")
    parser.add_argument("--pick", type=int, metavar="N", help="with --suggest, look up suggestion N")
    parser.add_argument("--here", action="store_true", help="use the current location")
    parser.add_argument("--lat", type=float, help="with --here, latitude to use instead of IP lookup")
    parser.add_argument("--lon", type=float, help="with --here, longitude to use instead of IP lookup")
    return parser


def build_search_bar(deps: LookupDeps, page: WeatherPage, args: argparse.Namespace) -> SearchBar:
    settings = deps.settings
    if not settings.geolocation_enabled:
        provider = None
    elif args.lat is not None and args.lon is not None:
        provider = FixedPositionProvider(args.lat, args.lon)
    else:
        provider = IPGeolocationProvider(deps.http_client)

    suggestions = SuggestionPipeline(
        deps.http_client,
        country_code=settings.country_code,
        country_name=settings.country_name,
        limit=settings.suggestion_limit,
        min_query_length=settings.min_query_length,
        debounce_seconds=settings.debounce_seconds,
    )
    geolocation = GeolocationPipeline(
        deps.http_client,
        provider,
        country_name=settings.country_name,
        options=PositionOptions(timeout=settings.geolocation_timeout),
    )
    return SearchBar(suggestions, geolocation, page.search, country_name=settings.country_name)


async def run(deps: LookupDeps, args: argparse.Namespace, console: Console) -> int:
    settings = deps.settings
    page = WeatherPage(deps.http_client, settings.weather_api_key, language=settings.weather_language)
    search_bar = build_search_bar(deps, page, args)

    if args.here:
        await search_bar.use_current_location()
        if search_bar.geolocation.error:
            console.print(render_geo_error(search_bar.geolocation.error))
            return 1
    elif args.suggest:
        search_bar.type(args.suggest)
        await search_bar.suggestions.wait_idle()
        visible = search_bar.suggestions.visible
        console.print(render_suggestions(visible, settings.country_name))
        if args.pick is None:
            return 0 if visible else 1
        if not 1 <= args.pick <= len(visible):
            console.print(f"[red]Sugestão {args.pick} inexistente[/red]")
            return 1
        await search_bar.select(visible[args.pick - 1])
    elif args.location:
        search_bar.type(args.location)
        search_bar.suggestions.cancel()
        await search_bar.submit()
    else:
        console.print(render_page(page))
        return 1

    console.print(render_page(page))
    return 0 if page.view is PageView.WEATHER else 1


async def amain(args: argparse.Namespace, console: Console) -> int:
    try:
        settings = load_settings()
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        return 2

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    async with create_http_client(settings.user_agent) as http_client:
        deps = LookupDeps(http_client=http_client, settings=settings)
        return await run(deps, args, console)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return asyncio.run(amain(args, Console()))


if __name__ == "__main__":
    sys.exit(main())

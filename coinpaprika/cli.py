"""
Command-line interface for the Coinpaprika API.

Every command performs one API call and prints the decoded result as JSON.
"""

import asyncio
import functools
from dataclasses import replace
from typing import Any, Callable, Optional

import click
from rich.console import Console

from . import __version__
from .core.config import API_URL, API_URL_PRO, ClientConfig, ConfigError, load_config
from .core.logging import setup_logging
from .data.client import Client
from .data.endpoints.base import BaseRequest
from .data.errors import CoinpaprikaError
from .data.models import APIModel

console = Console()


def async_command(f):
    """Decorator to make Click commands async-compatible."""

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))
    return wrapper


def _jsonable(value: Any) -> Any:
    if isinstance(value, APIModel):
        return value.to_dict()
    if isinstance(value, list):
        return [_jsonable(item) for item in value]
    return value


def _split(values: tuple) -> list:
    """Accept both repeated options and comma-separated values."""
    return [part for value in values for part in value.split(",") if part]


async def _send(ctx: click.Context, build: Callable[[Client], BaseRequest],
                head: Optional[int] = None) -> None:
    config: ClientConfig = ctx.obj["config"]
    try:
        async with Client(config=config) as client:
            result = await build(client).send()
    except CoinpaprikaError as e:
        raise click.ClickException(str(e)) from e

    if head is not None and isinstance(result, list):
        result = result[:head]
    console.print_json(data=_jsonable(result))


@click.group()
@click.version_option(__version__, prog_name="coinpaprika")
@click.option('--api-key', help='API key; selects the pro tier (default: $COINPAPRIKA_API_KEY)')
@click.option('--config', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='YAML configuration file')
@click.option('--log-level', default='WARNING', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False))
@click.option('--json-logs', is_flag=True, help='Emit structured JSON logs')
@click.pass_context
def main(ctx: click.Context, api_key: Optional[str], config_file: Optional[str],
         log_level: str, json_logs: bool) -> None:
    """Query the Coinpaprika market data API."""
    setup_logging(level=log_level, structured=json_logs)

    try:
        config = load_config(config_file)
        if api_key:
            base_url = API_URL_PRO if config.base_url == API_URL else config.base_url
            config = replace(config, api_key=api_key, base_url=base_url)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@main.command('global')
@click.pass_context
@async_command
async def global_(ctx):
    """Market overview data."""
    await _send(ctx, lambda client: client.global_overview())


@main.command('key-info')
@click.pass_context
@async_command
async def key_info(ctx):
    """Plan and usage of the configured API key."""
    await _send(ctx, lambda client: client.key_info())


@main.command()
@click.option('--head', type=int, help='Only print the first N coins')
@click.pass_context
@async_command
async def coins(ctx, head: Optional[int]):
    """List all coins."""
    await _send(ctx, lambda client: client.coins(), head=head)


@main.command()
@click.argument('coin_id')
@click.option('--events', is_flag=True, help='Show events instead of details')
@click.option('--exchanges', is_flag=True, help='Show exchanges instead of details')
@click.option('--twitter', is_flag=True, help='Show tweets instead of details')
@click.pass_context
@async_command
async def coin(ctx, coin_id: str, events: bool, exchanges: bool, twitter: bool):
    """Details of one coin, e.g. btc-bitcoin.

    Examples:
        coinpaprika coin btc-bitcoin
        coinpaprika coin eth-ethereum --events
    """
    if events:
        build = lambda client: client.coin_events(coin_id)
    elif exchanges:
        build = lambda client: client.coin_exchanges(coin_id)
    elif twitter:
        build = lambda client: client.twitter(coin_id)
    else:
        build = lambda client: client.coin(coin_id)
    await _send(ctx, build)


@main.command()
@click.argument('coin_id')
@click.option('--quotes', '-q', multiple=True, help='Quote currencies, e.g. -q USD -q PLN')
@click.option('--head', type=int, help='Only print the first N markets')
@click.pass_context
@async_command
async def markets(ctx, coin_id: str, quotes: tuple, head: Optional[int]):
    """Markets of one coin."""
    await _send(ctx, lambda client: client.coin_markets(coin_id).quotes(_split(quotes)), head=head)


@main.command()
@click.argument('coin_id')
@click.option('--period', type=click.Choice(['latest', 'today', 'historical']), default='latest',
              show_default=True)
@click.option('--start', help='Start: RFC3339, YYYY-MM-DD or Unix seconds (historical)')
@click.option('--end', help='End: RFC3339, YYYY-MM-DD or Unix seconds (historical)')
@click.option('--limit', type=int, help='Maximum rows (historical)')
@click.option('--quote', help='Quote currency: usd or btc')
@click.pass_context
@async_command
async def ohlcv(ctx, coin_id: str, period: str, start: Optional[str], end: Optional[str],
                limit: Optional[int], quote: Optional[str]):
    """Open/high/low/close values of one coin."""

    def build(client: Client):
        if period == 'historical':
            request = client.coin_ohlc_historical(coin_id)
            if start:
                request.start(start)
            if end:
                request.end(end)
            if limit is not None:
                request.limit(limit)
        elif period == 'today':
            request = client.coin_ohlc_today(coin_id)
        else:
            request = client.coin_ohlc_last_full_day(coin_id)
        if quote:
            request.quote(quote)
        return request

    await _send(ctx, build)


@main.command()
@click.option('--quotes', '-q', multiple=True, help='Quote currencies, e.g. -q USD -q BTC')
@click.option('--head', type=int, help='Only print the first N tickers')
@click.pass_context
@async_command
async def tickers(ctx, quotes: tuple, head: Optional[int]):
    """Tickers of all active coins."""
    await _send(ctx, lambda client: client.tickers().quotes(_split(quotes)), head=head)


@main.command()
@click.argument('coin_id')
@click.option('--quotes', '-q', multiple=True, help='Quote currencies, e.g. -q USD -q PLN')
@click.pass_context
@async_command
async def ticker(ctx, coin_id: str, quotes: tuple):
    """Ticker of one coin."""
    await _send(ctx, lambda client: client.ticker(coin_id).quotes(_split(quotes)))


@main.command()
@click.argument('coin_id')
@click.option('--start', help='Start: RFC3339, YYYY-MM-DD or Unix seconds (default: today UTC)')
@click.option('--end', help='End: RFC3339, YYYY-MM-DD or Unix seconds')
@click.option('--limit', type=int, help='Maximum rows')
@click.option('--quote', help='Quote currency: usd or btc')
@click.option('--interval', help='Point interval, e.g. 5m, 1h, 1d')
@click.pass_context
@async_command
async def historical(ctx, coin_id: str, start: Optional[str], end: Optional[str],
                     limit: Optional[int], quote: Optional[str], interval: Optional[str]):
    """Historical ticks of one coin.

    Examples:
        coinpaprika historical btc-bitcoin --start 2024-01-01 --interval 1d
    """

    def build(client: Client):
        request = client.historical_ticks(coin_id)
        if start:
            request.start(start)
        if end:
            request.end(end)
        if limit is not None:
            request.limit(limit)
        if quote:
            request.quote(quote)
        if interval:
            request.interval(interval)
        return request

    await _send(ctx, build)


@main.command()
@click.argument('exchange_id', required=False)
@click.option('--quotes', '-q', multiple=True, help='Quote currencies, e.g. -q USD')
@click.option('--markets', 'show_markets', is_flag=True, help='List the markets of EXCHANGE_ID')
@click.option('--head', type=int, help='Only print the first N entries')
@click.pass_context
@async_command
async def exchanges(ctx, exchange_id: Optional[str], quotes: tuple, show_markets: bool,
                    head: Optional[int]):
    """All exchanges, one exchange, or one exchange's markets."""
    quote_list = _split(quotes)
    if exchange_id is None:
        if show_markets:
            raise click.UsageError("--markets requires EXCHANGE_ID")
        build = lambda client: client.exchanges().quotes(quote_list)
    elif show_markets:
        build = lambda client: client.exchange_markets(exchange_id).quotes(quote_list)
    else:
        build = lambda client: client.exchange(exchange_id).quotes(quote_list)
    await _send(ctx, build, head=head)


@main.command()
@click.argument('tag_id', required=False)
@click.option('--additional-fields', '-f', multiple=True, help='coins and/or icos')
@click.option('--head', type=int, help='Only print the first N tags')
@click.pass_context
@async_command
async def tags(ctx, tag_id: Optional[str], additional_fields: tuple, head: Optional[int]):
    """All tags, or one tag when TAG_ID is given."""
    fields = _split(additional_fields)
    if tag_id is None:
        build = lambda client: client.tags().additional_fields(fields)
    else:
        build = lambda client: client.tag(tag_id).additional_fields(fields)
    await _send(ctx, build, head=head)


@main.command()
@click.argument('person_id')
@click.pass_context
@async_command
async def person(ctx, person_id: str):
    """One person, e.g. vitalik-buterin."""
    await _send(ctx, lambda client: client.person(person_id))


@main.command()
@click.argument('query')
@click.option('--category', '-c', 'categories', multiple=True,
              help='currencies, exchanges, icos, people, tags')
@click.option('--modifier', help='e.g. symbol_search')
@click.option('--limit', type=int, help='Results per category')
@click.pass_context
@async_command
async def search(ctx, query: str, categories: tuple, modifier: Optional[str], limit: Optional[int]):
    """Search the API.

    Examples:
        coinpaprika search btc -c currencies -c people --modifier symbol_search --limit 3
    """

    def build(client: Client):
        request = client.search(query).categories(_split(categories))
        if modifier:
            request.modifier(modifier)
        if limit is not None:
            request.limit(limit)
        return request

    await _send(ctx, build)


@main.command()
@click.argument('base_currency_id')
@click.argument('quote_currency_id')
@click.option('--amount', type=float, default=0, show_default=True)
@click.pass_context
@async_command
async def convert(ctx, base_currency_id: str, quote_currency_id: str, amount: float):
    """Convert AMOUNT of one currency into another.

    Examples:
        coinpaprika convert btc-bitcoin eth-ethereum --amount 100
    """
    value = int(amount) if float(amount).is_integer() else amount
    await _send(ctx, lambda client: client.price_convert(base_currency_id, quote_currency_id).amount(value))


@main.command()
@click.argument('platform_id', required=False)
@click.option('--head', type=int, help='Only print the first N entries')
@click.pass_context
@async_command
async def contracts(ctx, platform_id: Optional[str], head: Optional[int]):
    """Contract platforms, or the contracts of PLATFORM_ID."""
    if platform_id is None:
        build = lambda client: client.contract_platforms()
    else:
        build = lambda client: client.contracts(platform_id)
    await _send(ctx, build, head=head)


@main.command()
@click.option('--page', type=int, default=1, show_default=True)
@click.pass_context
@async_command
async def changelog(ctx, page: int):
    """Coin id changes (requires an API key)."""
    await _send(ctx, lambda client: client.changelog(page))


if __name__ == '__main__':
    main()

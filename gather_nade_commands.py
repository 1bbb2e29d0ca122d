# /// script
# requires-python = "==3.12.*"
# dependencies = [
#   "httpx",
#   "tqdm",
#   "humanize"
# ]
# ///

"""
Gathers the setpos/setang console commands for every nade on a csnades.gg map page.

The map page embeds its nade records as backslash-escaped JSON inside the page's script payload.
Those records are located by an anchor literal, parsed span-by-span, deduplicated, and then
each nade's own page is fetched (a few at a time) to pull out its console command.
The result is a .cfg file with a commented label above each command.

Usage:
  uv run ./gather_nade_commands.py --map mirage --out mirage.cfg --limit 6 --max 10

Args:
  --map (required; may also be given positionally)
  --out (optional) -- defaults to `<map>.cfg`
  --base (optional) -- defaults to https://csnades.gg
  --limit (optional) -- how many nade pages to fetch at once; defaults to 6
  --max (optional) -- only process the first N nades; convenient for testing
  --no-progress (optional) -- hides the progress bar
"""

import argparse
import asyncio
import json
import logging
import os
import re
import sys
from collections import deque
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any
from urllib.parse import quote

import httpx
import humanize
from tqdm import tqdm

## setup logging
log_level_name: str = os.getenv('LOG_LEVEL', 'INFO').upper()
log_level = getattr(
    logging, log_level_name, logging.INFO
)  # maps the string name to the corresponding logging level constant; defaults to INFO
logging.basicConfig(
    level=log_level,
    format='[%(asctime)s] %(levelname)s [%(module)s-%(funcName)s()::%(lineno)d] %(message)s',
    datefmt='%d/%b/%Y %H:%M:%S',
)
log = logging.getLogger(__name__)
## prevent httpx from logging
if log_level <= logging.INFO:
    for noisy in ('httpx', 'httpcore'):
        lg = logging.getLogger(noisy)
        lg.setLevel(logging.WARNING)  # or logging.ERROR if you prefer only errors
        lg.propagate = False  # don't bubble up to root


## constants
DEFAULT_BASE_URL = 'https://csnades.gg'
DEFAULT_CONCURRENCY = 6
REQUEST_PAUSE_SECONDS = 0.2  # polite pause before each request
USER_AGENT = 'csnades-command-gatherer/1.0 (+personal-use)'
ACCEPT = 'text/html,application/xhtml+xml'

NADE_TYPES: tuple[str, ...] = ('smoke', 'molotov', 'flashbang', 'he')
TEAMS: tuple[str, ...] = ('ct', 't')
CATEGORY_PATHS: dict[str, str] = {
    'smoke': 'smokes',
    'molotov': 'molotovs',
    'flashbang': 'flashbangs',
    'he': 'hes',
}
MISSING_CONSOLE_MARKER = 'MISSING_CONSOLE'


class DiscoveryFailure(RuntimeError):
    """
    Raised when the map page can't be fetched, or yields no nades. Ends the run; nothing is written.
    """


class MalformedEscapeError(ValueError):
    """
    Raised when an escaped fragment can't be decoded into a string.
    """


@dataclass(frozen=True)
class NadeSummary:
    """
    One nade record as found on the map page.
    - `id` is opaque and known to vary across environments, so it is never used for identity.
    - `natural_key` (type + slug) is the identity used for deduplication.
    """

    id: str
    slug: str
    nade_type: str
    team: str | None = None
    title_from: str | None = None
    title_to: str | None = None

    @property
    def natural_key(self) -> str:
        return f'{self.nade_type}:{self.slug}'


@dataclass
class NadeResult:
    """
    The outcome of processing one nade; every job returns one of these rather than raising.
    """

    nade: NadeSummary
    console_text: str | None = None
    error: str | None = None
    source_url: str | None = None


@dataclass(frozen=True)
class ArtifactHeader:
    source_label: str
    total: int


@dataclass
class RunSummary:
    artifact_text: str
    total: int
    missing_count: int


def category_path(nade_type: str) -> str | None:
    """
    Maps a nade type to its url path segment, eg 'smoke' -> 'smokes'; returns None for unknown types.
    """
    return CATEGORY_PATHS.get(nade_type)


class StringUnescaper:
    """
    Turns a backslash-escaped fragment (as embedded in the page's script payload) into its string value.
    - Re-escapes bare double-quotes so the fragment can be wrapped as a JSON string literal.
    - Lets `json.loads` do the actual unescaping (`\\n`, `\\"`, `\\\\`, `\\uXXXX`, etc).
    - Raises MalformedEscapeError when the decode fails, eg a dangling backslash or an unknown escape.
    """

    escape_pair_pattern = re.compile(r'\\.|"', re.S)

    @classmethod
    def unescape(cls, fragment: str) -> str:
        safe: str = cls.escape_pair_pattern.sub(
            lambda m: '\\"' if m.group(0) == '"' else m.group(0), fragment
        )  # leaves existing escape pairs alone; only bare quotes get escaped
        try:
            value: str = json.loads(f'"{safe}"')
        except json.JSONDecodeError as exc:
            raise MalformedEscapeError(f'could not unescape fragment, ``{fragment[:80]}``; {exc}') from exc
        return value

    @staticmethod
    def escape_like_source(value: str) -> str:
        """
        Escapes a string the way the site embeds values; the inverse of unescape().
        Used by tests and for building fixtures.
        """
        return (
            value.replace('\\', '\\\\')
            .replace('"', '\\"')
            .replace('\n', '\\n')
            .replace('\r', '\\r')
            .replace('\t', '\\t')
        )


class NadeExtractor:
    """
    Pulls nade records (and console commands) out of page html without parsing the html.
    - Finds every occurrence of the anchor literal `\\"id\\":\\"nade_` in order.
    - Treats the text from one anchor to the next (or to the end) as one record's span.
    - Searches each span independently for id, slug, type, and the optional team/titles.
    - Drops spans missing id, slug, or type (eg a truncated trailing fragment).
    - Never raises for messy surrounding markup; bad records are just skipped.
    """

    anchor = '\\"id\\":\\"nade_'
    id_pattern = re.compile(r'\\"id\\":\\"(nade_[^\\"]+)\\"')
    slug_pattern = re.compile(r'\\"id\\":\\"nade_[^\\"]+\\",\\"slug\\":\\"([^\\"]+)\\"')
    type_pattern = re.compile(r'\\"type\\":\\"(smoke|molotov|flashbang|he)\\"')
    team_pattern = re.compile(r'\\"team\\":\\"(ct|t)\\"')
    title_from_pattern = re.compile(r'\\"titleFrom\\":\\"([^\\"]+)\\"')
    title_to_pattern = re.compile(r'\\"titleTo\\":\\"([^\\"]+)\\"')
    console_pattern = re.compile(r'\\"console\\":\\"(.*?)\\"', re.S)

    @classmethod
    def anchor_offsets(cls, document: str) -> list[int]:
        offsets: list[int] = []
        idx: int = 0
        while True:
            found: int = document.find(cls.anchor, idx)
            if found == -1:
                break
            offsets.append(found)
            idx = found + len(cls.anchor)
        return offsets

    @classmethod
    def spans(cls, document: str) -> list[str]:
        """
        Slices the document into one span per anchor.
        Called by: extract_records()
        """
        offsets: list[int] = cls.anchor_offsets(document)
        spans: list[str] = []
        for i, start in enumerate(offsets):
            end: int = offsets[i + 1] if i + 1 < len(offsets) else len(document)
            spans.append(document[start:end])
        return spans

    @classmethod
    def parse_span(cls, span: str) -> NadeSummary | None:
        id_match = cls.id_pattern.search(span)
        slug_match = cls.slug_pattern.search(span)
        type_match = cls.type_pattern.search(span)
        if not id_match or not slug_match or not type_match:
            return None
        team_match = cls.team_pattern.search(span)
        title_from_match = cls.title_from_pattern.search(span)
        title_to_match = cls.title_to_pattern.search(span)
        return NadeSummary(
            id=id_match.group(1),
            slug=slug_match.group(1),
            nade_type=type_match.group(1),
            team=team_match.group(1) if team_match else None,
            title_from=title_from_match.group(1) if title_from_match else None,
            title_to=title_to_match.group(1) if title_to_match else None,
        )

    @classmethod
    def extract_records(cls, document: str) -> list[NadeSummary]:
        """
        Returns every valid nade record in document order (duplicates included; see dedupe()).
        Called by: NadePipeline.discover()
        """
        records: list[NadeSummary] = []
        spans: list[str] = cls.spans(document)
        for span in spans:
            record: NadeSummary | None = cls.parse_span(span)
            if record is None:
                log.debug(f'skipping span without id/slug/type, ``{span[:80]}``')
                continue
            records.append(record)
        log.debug(f'anchors found: {len(spans)}; valid records: {len(records)}')
        return records

    @classmethod
    def extract_console(cls, document: str) -> str | None:
        """
        Returns the unescaped console text from a nade page, or None if absent or undecodable.
        Called by: NadePipeline.process_nade()
        """
        match = cls.console_pattern.search(document)
        if not match:
            return None
        try:
            return StringUnescaper.unescape(match.group(1))
        except MalformedEscapeError as exc:
            log.debug(f'treating console as missing; {exc}')
            return None


def dedupe(records: Iterable[NadeSummary]) -> list[NadeSummary]:
    """
    Keeps the first record seen for each (type, slug) natural key, preserving order.
    Ids are ignored because they can vary across environments.
    """
    seen: set[str] = set()
    uniques: list[NadeSummary] = []
    for record in records:
        key: str = record.natural_key
        if key in seen:
            continue
        seen.add(key)
        uniques.append(record)
    return uniques


class BoundedScheduler:
    """
    Runs async jobs with at most `limit` in flight, returning outcomes in submission order.
    - Holds a FIFO of pending (slot, job) pairs and a count of active jobs.
    - Admits the next pending job as soon as any running job settles; no batching.
    - Stores a job's exception in its slot instead of raising; siblings carry on.
    - Clamps limits below 1 up to 1.
    - Each instance owns its own state; use one per run (see run_bounded()).
    """

    def __init__(self, limit: int) -> None:
        self.limit: int = max(1, int(limit))
        self.active: int = 0
        self.peak_active: int = 0
        self.pending: deque[tuple[int, Callable[[], Awaitable[Any]]]] = deque()
        self.outcomes: list[Any] = []
        self.remaining: int = 0
        self.tasks: set[asyncio.Task] = set()
        self.all_settled: asyncio.Future | None = None

    async def run(self, jobs: Sequence[Callable[[], Awaitable[Any]]]) -> list[Any]:
        jobs = list(jobs)
        if not jobs:
            return []
        self.outcomes = [None] * len(jobs)
        self.pending = deque(enumerate(jobs))
        self.remaining = len(jobs)
        self.all_settled = asyncio.get_running_loop().create_future()
        self._admit()
        await self.all_settled
        log.debug(f'jobs: {len(jobs)}; limit: {self.limit}; peak active: {self.peak_active}')
        return self.outcomes

    def _admit(self) -> None:
        while self.active < self.limit and self.pending:
            slot, job = self.pending.popleft()
            self.active += 1
            self.peak_active = max(self.peak_active, self.active)
            task: asyncio.Task = asyncio.ensure_future(self._run_one(slot, job))
            self.tasks.add(task)  # keeps a reference until the task is done
            task.add_done_callback(self.tasks.discard)

    async def _run_one(self, slot: int, job: Callable[[], Awaitable[Any]]) -> None:
        try:
            self.outcomes[slot] = await job()
        except Exception as exc:
            log.debug(f'job in slot {slot} failed; ``{exc!r}``')
            self.outcomes[slot] = exc
        finally:
            self.active -= 1
            self.remaining -= 1
            if self.remaining == 0:
                assert self.all_settled is not None
                if not self.all_settled.done():
                    self.all_settled.set_result(None)
            else:
                self._admit()


async def run_bounded(jobs: Sequence[Callable[[], Awaitable[Any]]], limit: int) -> list[Any]:
    """
    Runs jobs on a fresh BoundedScheduler; see that class for the semantics.
    """
    scheduler = BoundedScheduler(limit)
    return await scheduler.run(jobs)


class ArtifactRenderer:
    """
    Builds the .cfg text from ordered results.
    - Writes two header comments (source, total) and a blank line.
    - Labels each nade as `TYPE | TEAM | from -> to`, falling back to `ANY` and the slug.
    - Adds the nade's url when known.
    - Narrows console text to the first setpos/setang pair; otherwise keeps the trimmed text.
    - Writes a MISSING_CONSOLE marker (and counts it) when there's no console text.
    - Is deterministic: the same results always produce the same text.
    """

    command_pair_pattern = re.compile(r'setpos [^;\r\n\\]+;setang [^\r\n\\]+', re.I)

    def __init__(self) -> None:
        self.missing_count: int = 0

    @staticmethod
    def sanitize_comment(value: str | None) -> str:
        return re.sub(r'\s+', ' ', value or '').strip()

    @classmethod
    def label_for(cls, nade: NadeSummary) -> str:
        title_from: str = cls.sanitize_comment(nade.title_from)
        title_to: str = cls.sanitize_comment(nade.title_to)
        team: str = nade.team.upper() if nade.team else 'ANY'
        display: str = f'{title_from} -> {title_to}' if title_from and title_to else nade.slug
        parts: list[str] = [nade.nade_type.upper(), team, display]
        return ' | '.join(part for part in parts if part)

    @classmethod
    def command_line_for(cls, console_text: str) -> str:
        match = cls.command_pair_pattern.search(console_text)
        return match.group(0) if match else console_text.strip()

    @staticmethod
    def count_missing(results: Iterable[NadeResult]) -> int:
        return sum(1 for result in results if not result.console_text)

    def render(self, results: Sequence[NadeResult], header: ArtifactHeader) -> str:
        """
        Renders the full document.
        Called by: NadePipeline.run()
        """
        lines: list[str] = [
            f'// Generated from {header.source_label}',
            f'// Total nades: {header.total}',
            '',
        ]
        self.missing_count = 0
        for result in results:
            lines.append(f'// {self.label_for(result.nade)}')
            if result.source_url:
                lines.append(f'// {result.source_url}')
            if not result.console_text:
                self.missing_count += 1
                lines.append(f'// {MISSING_CONSOLE_MARKER}')
                lines.append('')
                continue
            lines.append(self.command_line_for(result.console_text))
            lines.append('')
        return '\n'.join(lines)


class UrlBuilder:
    """
    Centralizes construction of the map-page and nade-page urls.
    """

    def __init__(self, base: str, map_slug: str) -> None:
        self.base: str = base.rstrip('/')
        self.map_slug: str = map_slug

    @staticmethod
    def encode_segment(value: str) -> str:
        return quote(value, safe="!~*'()")  # matches javascript's encodeURIComponent

    def source_label(self) -> str:
        return f'{self.base}/{self.map_slug}'

    def map_url(self) -> str:
        return f'{self.base}/{self.encode_segment(self.map_slug)}'

    def nade_url(self, nade: NadeSummary) -> str | None:
        type_path: str | None = category_path(nade.nade_type)
        if type_path is None:
            return None
        return f'{self.map_url()}/{type_path}/{self.encode_segment(nade.slug)}'


class ApiClient:
    """
    Fetches page text over a shared httpx.AsyncClient, with retries and backoff.
    - Pauses briefly before each request to be server-friendly.
    - Retries 5xx responses and transport errors with exponential backoff.
    - Raises httpx.HTTPStatusError, naming the status and url, for any other non-success response.
    - Raises the last encountered exception after exhausting the retry budget.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        max_tries: int = 4,
        pause_s: float = REQUEST_PAUSE_SECONDS,
        backoff_cap_s: float = 15.0,
    ) -> None:
        self.client: httpx.AsyncClient = client
        self.max_tries: int = max(1, max_tries)
        self.pause_s: float = pause_s
        self.backoff_cap_s: float = backoff_cap_s

    @staticmethod
    def status_error(resp: httpx.Response, url: str) -> httpx.HTTPStatusError:
        return httpx.HTTPStatusError(
            f'HTTP {resp.status_code} {resp.reason_phrase} for {url}', request=resp.request, response=resp
        )

    async def fetch_document(self, url: str) -> str:
        last_exc: Exception | None = None
        for attempt in range(1, self.max_tries + 1):
            if attempt > 1:
                await _sleep(min(2**attempt, self.backoff_cap_s))
            await _sleep(self.pause_s)
            log.debug(f'trying url, ``{url}``; attempt {attempt}')
            try:
                resp: httpx.Response = await self.client.get(url, follow_redirects=True)
            except httpx.TransportError as exc:
                last_exc = exc
                continue
            if resp.status_code >= 500:
                last_exc = self.status_error(resp, url)
                continue
            if not resp.is_success:
                raise self.status_error(resp, url)
            return resp.text
        assert last_exc is not None
        raise last_exc


class NadePipeline:
    """
    Coordinates discovery, per-nade fetching, and rendering, using an injected fetch callable.
    - Fetches the map page and extracts, dedupes, and (optionally) caps the nade list.
    - Raises DiscoveryFailure if the map page can't be fetched or has no nades.
    - Fetches each nade page through a BoundedScheduler.
    - Converts every per-nade failure into a NadeResult error, so one bad page never stops the run.
    - Renders results in discovery order, regardless of which fetch finished first.
    """

    def __init__(
        self,
        fetch_document: Callable[[str], Awaitable[str]],
        urls: UrlBuilder,
        *,
        concurrency: int = DEFAULT_CONCURRENCY,
        max_nades: int | None = None,
        progress: bool = True,
    ) -> None:
        self.fetch_document = fetch_document
        self.urls: UrlBuilder = urls
        self.concurrency: int = max(1, concurrency)
        self.max_nades: int | None = max(1, max_nades) if max_nades is not None else None
        self.progress: bool = progress

    async def discover(self) -> list[NadeSummary]:
        map_url: str = self.urls.map_url()
        log.info(f'Fetching map page: {map_url}')
        try:
            html: str = await self.fetch_document(map_url)
        except Exception as exc:
            raise DiscoveryFailure(f'Could not fetch map page {map_url}: {exc}') from exc
        nades: list[NadeSummary] = dedupe(NadeExtractor.extract_records(html))
        if self.max_nades is not None:
            nades = nades[: self.max_nades]
        if not nades:
            raise DiscoveryFailure(f'Could not find any nades on {map_url}. The site layout may have changed.')
        max_note: str = f' (max={self.max_nades})' if self.max_nades is not None else ''
        log.info(f'Found nades: {len(nades)}{max_note}')
        return nades

    async def process_nade(self, nade: NadeSummary) -> NadeResult:
        """
        Fetches one nade page and extracts its console text; never raises.
        Called by: run(), via the scheduler
        """
        nade_url: str | None = self.urls.nade_url(nade)
        if nade_url is None:
            log.warning(f'unknown type for nade ``{nade.slug}``: ``{nade.nade_type}``')
            return NadeResult(nade=nade, error=f'Unknown type: {nade.nade_type}')
        try:
            html: str = await self.fetch_document(nade_url)
        except Exception as exc:
            log.warning(f'could not fetch nade page; ``{exc}``')
            return NadeResult(nade=nade, error=str(exc) or repr(exc))
        console_text: str | None = NadeExtractor.extract_console(html)
        return NadeResult(nade=nade, console_text=console_text, source_url=nade_url)

    async def run(self) -> RunSummary:
        nades: list[NadeSummary] = await self.discover()

        with tqdm(total=len(nades), desc='Fetching nades', disable=not self.progress) as pbar:

            def job_for(nade: NadeSummary) -> Callable[[], Awaitable[NadeResult]]:
                async def job() -> NadeResult:
                    try:
                        return await self.process_nade(nade)
                    finally:
                        pbar.update(1)

                return job

            outcomes: list[Any] = await run_bounded([job_for(nade) for nade in nades], self.concurrency)

        results: list[NadeResult] = []
        for nade, outcome in zip(nades, outcomes):
            if isinstance(outcome, NadeResult):
                results.append(outcome)
            else:
                results.append(NadeResult(nade=nade, error=str(outcome)))

        renderer = ArtifactRenderer()
        header = ArtifactHeader(source_label=self.urls.source_label(), total=len(results))
        artifact_text: str = renderer.render(results, header)
        return RunSummary(artifact_text=artifact_text, total=len(results), missing_count=renderer.missing_count)


class CLI:
    """
    Manages command-line parsing for the script entrypoint.
    - Accepts the map slug either positionally or via `--map`.
    - Defaults the output path to `<map>.cfg`.
    - Clamps `--limit` and `--max` to at least 1.
    - Exposes a parse helper to support testing with custom argv.
    """

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Collect setpos/setang commands for every nade on a csnades.gg map.')
        parser.add_argument('map_positional', nargs='?', metavar='MAP', help='Map slug like mirage')
        parser.add_argument('--map', dest='map_slug', default=None, help='Map slug like mirage')
        parser.add_argument('--out', default=None, help='Output path; defaults to `<map>.cfg`')
        parser.add_argument('--base', default=DEFAULT_BASE_URL, help=f'Site origin; defaults to {DEFAULT_BASE_URL}')
        parser.add_argument(
            '--limit',
            type=int,
            default=DEFAULT_CONCURRENCY,
            metavar='INTEGER',
            help=f'How many nade pages to fetch at once; defaults to {DEFAULT_CONCURRENCY}.',
        )
        parser.add_argument(
            '--max',
            dest='max_nades',
            type=int,
            default=None,
            metavar='INTEGER',
            help='Optional. Only process the first N nades (useful for testing).',
        )
        parser.add_argument('--no-progress', action='store_true', help='Hide the progress bar.')
        return parser

    @staticmethod
    def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
        parser: argparse.ArgumentParser = CLI.build_parser()
        args: argparse.Namespace = parser.parse_args(argv)
        args.map_slug = (args.map_slug or args.map_positional or '').strip()
        if not args.map_slug:
            parser.error('a map is required, eg `--map mirage`')
        args.out = args.out or f'{args.map_slug}.cfg'
        args.limit = max(1, args.limit)
        if args.max_nades is not None:
            args.max_nades = max(1, args.max_nades)
        return args


async def _sleep(seconds: float) -> None:
    """
    Sleeps for given seconds; centralizes sleep for easier tweaking.
    """
    if seconds > 0:
        await asyncio.sleep(seconds)


async def gather_commands(args: argparse.Namespace) -> RunSummary:
    """
    Builds the httpx client and runs the pipeline.
    Called by: main()
    """
    headers: dict[str, str] = {'user-agent': USER_AGENT, 'accept': ACCEPT}
    timeout: httpx.Timeout = httpx.Timeout(connect=30.0, read=60.0, write=60.0, pool=30.0)
    limits: httpx.Limits = httpx.Limits(max_keepalive_connections=args.limit, max_connections=args.limit)
    async with httpx.AsyncClient(headers=headers, timeout=timeout, limits=limits) as client:
        api = ApiClient(client)
        urls = UrlBuilder(args.base, args.map_slug)
        pipeline = NadePipeline(
            api.fetch_document,
            urls,
            concurrency=args.limit,
            max_nades=args.max_nades,
            progress=not args.no_progress,
        )
        return await pipeline.run()


def main(argv: list[str] | None = None) -> int:
    """
    Fetches a map's nades, gathers each nade's console command, and writes the .cfg file.

    Flow:
    - Parses CLI args: map, output path, base url, concurrency limit, optional max.
    - Fetches the map page; extracts, dedupes, and caps the nade records.
    - Fetches nade pages concurrently (bounded); failures become per-nade errors.
    - Renders the .cfg text in discovery order and writes it.
    - Reports the output size, elapsed time, and the missing-console count.
    - On a discovery failure, prints the reason and returns 1 without writing anything.

    Called by: dundermain
    """
    ## handle args --------------------------------------------------
    args: argparse.Namespace = CLI.parse_args(argv)
    out_path: Path = Path(args.out).expanduser()
    start_time: datetime = datetime.now()

    ## run pipeline --------------------------------------------------
    try:
        summary: RunSummary = asyncio.run(gather_commands(args))
    except DiscoveryFailure as exc:
        print(f'Error: {exc}', file=sys.stderr)
        return 1

    ## write output --------------------------------------------------
    out_path.write_text(summary.artifact_text, encoding='utf-8')

    ## wrap up output -----------------------------------------------
    elapsed: str = humanize.naturaldelta(datetime.now() - start_time)
    print(f'Wrote: {out_path} ({humanize.naturalsize(out_path.stat().st_size)}, {summary.total} nades, {elapsed})')
    if summary.missing_count:
        print(f'Missing console: {summary.missing_count}')
    return 0

    ## end def main()


if __name__ == '__main__':
    raise SystemExit(main())

import logging
import os
import subprocess
import sys
import time
import webbrowser

import click

from .accumulator import MODES
from .errors import PiDigitsError
from .extractor import extract_window, series_terms
from .formats import serialize_windows
from .formatting import format_elapsed, ordinal
from .verify import verify_window


def _run_app(host: str, port: int, open_browser: bool):
    url = f"http://{host}:{port}"
    cmd = [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        os.path.join(os.path.dirname(__file__), "streamlit_app.py"),
        "--server.address",
        host,
        "--server.port",
        str(port),
    ]
    proc = subprocess.Popen(cmd)
    if open_browser:
        for _ in range(60):
            time.sleep(0.2)
            try:
                webbrowser.open(url)
                break
            except webbrowser.Error:
                continue
    raise SystemExit(proc.wait())


def _compute(n: int, count: int, mode: str, word_bits: int, workers: int, progress=None):
    try:
        return extract_window(n, count, word_bits=word_bits, mode=mode, workers=workers, progress=progress)
    except (PiDigitsError, ValueError) as e:
        raise click.ClickException(str(e))


_count_option = click.option("--count", default=10, show_default=True, type=click.IntRange(1, 12))
_mode_option = click.option("--mode", type=click.Choice(list(MODES), case_sensitive=False), default="mpf", show_default=True)
_word_bits_option = click.option("--word-bits", default=32, show_default=True, type=click.IntRange(8, 64))
_workers_option = click.option("--workers", default=1, show_default=True, type=click.IntRange(min=1))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Log the prime sweep to stderr.")
def main(verbose: bool):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")


@main.command()
@click.argument("n", type=click.IntRange(min=0))
@_count_option
@_mode_option
@_word_bits_option
@_workers_option
@click.option("--progress/--no-progress", default=True, show_default=True)
@click.option("--verify/--no-verify", default=False, show_default=True)
def digits(n: int, count: int, mode: str, word_bits: int, workers: int, progress: bool, verify: bool):
    """Compute the digits of pi starting at zero-based position N."""
    mode = mode.lower().strip()
    click.echo(f"Computing the {ordinal(n)} digit of pi...")
    start = time.perf_counter()
    if progress:
        limit = 3 * series_terms(n)
        with click.progressbar(length=limit, label="primes") as bar:
            seen = [0]

            def advance(a: int, _limit: int):
                bar.update(a - seen[0])
                seen[0] = a

            window = _compute(n, count, mode, word_bits, workers, progress=advance)
            bar.update(limit - seen[0])
    else:
        window = _compute(n, count, mode, word_bits, workers)
    elapsed = time.perf_counter() - start
    click.echo(f"Decimal digits of pi at position {n}: {window.text}")
    click.echo(f"Time to compute: {format_elapsed(elapsed)}")
    click.echo(f"Largest prime computed: {window.largest_prime}")
    if verify:
        ok, kind = verify_window(window)
        if not ok:
            raise click.ClickException(f"verification failed ({kind})")
        click.echo(f"Verified against {kind}")


@main.command()
@click.argument("start", type=click.IntRange(min=0))
@click.argument("count", type=click.IntRange(min=1))
@click.option("--step", default=10, show_default=True, type=click.IntRange(min=1))
@_mode_option
@_word_bits_option
@_workers_option
@click.option("--format", "fmt", type=click.Choice(["txt", "json", "csv", "tsv", "ndjson"], case_sensitive=False), default="txt", show_default=True)
@click.option("--out", "out_path", default="", show_default=True)
def scan(start: int, count: int, step: int, mode: str, word_bits: int, workers: int, fmt: str, out_path: str):
    """Compute COUNT successive windows beginning at START."""
    mode = mode.lower().strip()
    windows = [_compute(start + i * step, 10, mode, word_bits, workers) for i in range(count)]
    payload, _ = serialize_windows(windows, fmt)
    if out_path:
        with open(out_path, "wb") as f:
            f.write(payload)
        click.echo(out_path)
    else:
        click.echo(payload.decode("utf-8"), nl=False)


@main.command()
@click.argument("n", type=click.IntRange(min=0))
@_count_option
@_mode_option
def verify(n: int, count: int, mode: str):
    """Recompute the window at N and compare it with reference digits."""
    window = _compute(n, count, mode.lower().strip(), 32, 1)
    ok, kind = verify_window(window)
    if not ok:
        raise click.ClickException(f"verification failed ({kind})")
    click.echo(f"{window.text} ok ({kind})")


@main.command()
@click.option("--host", default="localhost", show_default=True)
@click.option("--port", default=8501, show_default=True, type=int)
@click.option("--open/--no-open", default=True, show_default=True)
def app(host: str, port: int, open: bool):
    _run_app(host, port, open)

import os
import sys
import time

import streamlit as st

_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

from pidigits.accumulator import MODES
from pidigits.errors import PiDigitsError
from pidigits.extractor import extract_window
from pidigits.formats import serialize_windows
from pidigits.formatting import format_elapsed, ordinal, progress_fraction
from pidigits.verify import verify_window


def _style():
    st.markdown(
        """
        <style>
        :root {--brand:#0ea5e9;--ink:#0b132b;--muted:#6b7280;--bg0:#0b132b;--bg1:#16213e;--bg2:#1f2937;--fg:#e5e7eb}
        .stApp {background: radial-gradient(60% 80% at 20% 10%, rgba(14,165,233,.15), transparent 40%), linear-gradient(180deg, var(--bg0), var(--bg1))}
        .title-wrap {padding: 24px 20px 10px; border-bottom: 1px solid rgba(255,255,255,.08); margin-bottom: 12px}
        .title {font-weight: 800; font-size: 28px; letter-spacing: .2px; color: white}
        .subtitle {color: var(--fg); opacity:.8; margin-top: 6px}
        .digits {font-family: monospace; font-size: 40px; letter-spacing: 6px; color: #7dd3fc}
        </style>
        """,
        unsafe_allow_html=True,
    )


def _header():
    st.markdown(
        """
        <div class="title-wrap">
          <div class="title">pidigits</div>
          <div class="subtitle">ten digits of π at any position, without the digits before them.</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def _cli_command(n: int, count: int, mode: str, word_bits: int, workers: int, verify: bool) -> str:
    parts = ["python3", "-m", "pidigits", "digits", str(int(n))]
    parts += ["--count", str(int(count))]
    parts += ["--mode", mode]
    parts += ["--word-bits", str(int(word_bits))]
    parts += ["--workers", str(int(workers))]
    if verify:
        parts += ["--verify"]
    return " ".join(parts)


def main():
    st.set_page_config(page_title="pidigits", page_icon="🧮", layout="wide")
    _style()
    _header()
    if "history" not in st.session_state:
        st.session_state.history = []
    with st.sidebar:
        n = st.number_input("Position (0-based, after the point)", min_value=0, max_value=10_000_000, value=1000, step=100, key="n")
        mode = st.selectbox("Accumulator", options=list(MODES), index=list(MODES).index("mpf"), key="mode")
        count_max = 10 if mode == "float" else 12
        count = st.slider("Digits", min_value=1, max_value=count_max, value=10, key="count")
        word_bits = st.selectbox("Word size (bits)", options=[32, 48, 64], index=0, key="word_bits")
        workers = st.slider("CPU workers", min_value=1, max_value=os.cpu_count() or 8, value=1, key="workers")
        verify = st.checkbox("Verify against reference digits", value=False, key="verify")
        go = st.button("Compute", type="primary", use_container_width=True)

    if not go:
        st.caption("Tip: positions beyond a few thousand take a while; use more workers.")
        if st.session_state.history:
            st.subheader("Recent runs")
            for item in st.session_state.history[:5]:
                st.write(item)
        return

    status = st.empty()
    status.info(f"Computing the {ordinal(int(n))} digit of π...")
    bar = st.progress(0)

    def advance(a: int, limit: int):
        bar.progress(progress_fraction(a, limit))

    t0 = time.perf_counter()
    try:
        window = extract_window(int(n), int(count), word_bits=int(word_bits), mode=mode, workers=int(workers), progress=advance)
    except (PiDigitsError, ValueError) as e:
        status.error(str(e))
        return
    t1 = time.perf_counter()
    bar.progress(1.0)
    status.success(f"Done in {format_elapsed(t1 - t0)}")
    st.markdown(f'<div class="digits">{window.text}</div>', unsafe_allow_html=True)
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Series terms", f"{window.terms:,}")
    with col2:
        st.metric("Primes swept", f"{window.primes:,}")
    with col3:
        st.metric("Largest prime", f"{window.largest_prime:,}")
    if verify:
        ok, kind = verify_window(window)
        if ok:
            st.success(f"Verification passed ({kind})")
        else:
            st.error(f"Verification failed ({kind})")
    payload, mime = serialize_windows([window], "json")
    st.download_button("Download", data=payload, file_name=f"pi_{window.position}.json", mime=mime, use_container_width=True)
    st.code(_cli_command(n, count, mode, word_bits, workers, verify), language="bash")
    st.session_state.history.insert(0, f"position {window.position}: {window.text}")


if __name__ == "__main__":
    main()

# app/streamlit_app.py
import io
import os

import pandas as pd
import streamlit as st

from soundalike.config import load_config
from soundalike.errors import SoundalikeError
from soundalike.matchers import sounds_alike
from soundalike.phonetic import encode
from soundalike.pipeline import build_matcher, process_table

st.set_page_config(page_title="Soundalike", page_icon="🔊", layout="wide")
st.title("🔊 Soundalike")
st.caption("Check whether free-text labels sound alike (Soundex variant with numeral spelling).")

# --- Sidebar: inputs ---------------------------------------------------------
st.sidebar.header("Inputs")

pairs_file = st.sidebar.file_uploader(
    "Upload pairs file (CSV or TSV with columns: pair_id, left, right)",
    type=["csv", "tsv"],
)

cfg_file = st.sidebar.file_uploader(
    "Optional: upload config YAML",
    type=["yaml", "yml"],
    help="If omitted, uses configs/example.yaml from the repo when present, else defaults.",
)

run_btn = st.sidebar.button("Compare pairs", type="primary")


# --- Helpers -----------------------------------------------------------------
def _resolve_cfg_path(upload):
    """Return a filesystem path for the YAML: uploaded temp file, repo default, or None."""
    if upload is None:
        default_path = os.path.join("configs", "example.yaml")
        return default_path if os.path.exists(default_path) else None

    # Persist upload to a temp file on disk for the loader
    tmp_dir = ".streamlit_tmp"
    os.makedirs(tmp_dir, exist_ok=True)
    path = os.path.join(tmp_dir, upload.name)
    with open(path, "wb") as f:
        f.write(upload.getbuffer())
    return path


def _read_pairs(upload, text_cols) -> pd.DataFrame:
    """Read CSV/TSV keeping label columns as text."""
    if upload is None:
        raise ValueError("No file uploaded.")
    name = upload.name.lower()
    sep = "\t" if name.endswith(".tsv") else ","
    dtypes = {c: str for c in text_cols}
    try:
        return pd.read_csv(upload, sep=sep, dtype=dtypes, keep_default_na=False)
    except (pd.errors.ParserError, UnicodeDecodeError):
        # Fallback: sniff delimiter
        upload.seek(0)
        txt = upload.read()
        upload.seek(0)
        return pd.read_csv(io.BytesIO(txt), sep=None, engine="python", dtype=dtypes, keep_default_na=False)


try:
    cfg = load_config(_resolve_cfg_path(cfg_file))
except (SoundalikeError, OSError) as e:
    st.error(f"Config error: {e}")
    st.stop()

# --- UI: quick comparison -----------------------------------------------------
with st.expander("Quick comparison", expanded=True):
    c1, c2 = st.columns(2)
    a = c1.text_input("First label", value="Guns 'n' Roses")
    b = c2.text_input("Second label", value="Guns and Roses")
    try:
        code_a, code_b = encode(a, cfg.namer()), encode(b, cfg.namer())
    except SoundalikeError as e:
        st.error(str(e))
    else:
        c1.code(code_a or "(empty)")
        c2.code(code_b or "(empty)")
        if sounds_alike(a, b, cfg.namer()):
            st.success("These sound alike.")
        else:
            st.warning("These do not sound alike.")

st.divider()

# --- UI: preview --------------------------------------------------------------
cols = cfg.columns
with st.expander("Preview data (first 20 rows)", expanded=False):
    if pairs_file is not None:
        try:
            st.dataframe(_read_pairs(pairs_file, [cols.left, cols.right]).head(20), width="stretch")
        except (ValueError, pd.errors.ParserError) as e:
            st.error(f"Could not read pairs file: {e}")
    else:
        st.info("Upload a CSV/TSV in the sidebar to preview it here.")

# --- Run ----------------------------------------------------------------------
if run_btn:
    if pairs_file is None:
        st.error("Please upload a pairs file first.")
        st.stop()

    try:
        df = _read_pairs(pairs_file, [cols.left, cols.right])
        with st.status("Comparing pairs…", expanded=False) as status:
            df_out = process_table(df, build_matcher(cfg=cfg))
            status.update(label="Done ✅", state="complete")
    except (ValueError, pd.errors.ParserError) as e:
        st.error(f"Could not process pairs file: {e}")
        st.stop()

    st.subheader("Results")
    st.metric("Pairs that sound alike", f"{int(df_out['sounds_alike'].sum())} / {len(df_out)}")
    st.dataframe(df_out, width="stretch")

    # Download
    csv_bytes = df_out.to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download results CSV",
        data=csv_bytes,
        file_name="soundalike_results.csv",
        mime="text/csv",
    )

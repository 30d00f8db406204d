"""Streamlit Web UI for resume-compiler.

Upload a resume record (JSON/YAML) → preview the outline → export and
download the .docx.
"""

from __future__ import annotations

import json
import logging

logger = logging.getLogger(__name__)

import streamlit as st
import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

load_dotenv()

from resume_compiler.compiler import compile_resume, export_resume_to_docx
from resume_compiler.config import load_config
from resume_compiler.exporter import ExportResult
from resume_compiler.parsers.record_loader import parse_resume_data
from resume_compiler.utils.preview import outline_markdown, upload_key

MAX_UPLOAD_BYTES = 2 * 1024 * 1024

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Resume Compiler",
    page_icon=":page_facing_up:",
    layout="centered",
)

config = load_config()

st.title("Resume Compiler")
st.caption("Turn a saved resume record into a formatted Word document.")

uploaded = st.file_uploader("Resume record", type=["json", "yaml", "yml"])
if uploaded is None:
    st.info("Upload a resume record exported from the resume editor.")
    st.stop()

if uploaded.size > MAX_UPLOAD_BYTES:
    st.error("The resume record is larger than 2MB.")
    st.stop()

try:
    raw = uploaded.getvalue().decode("utf-8")
    data = json.loads(raw) if uploaded.name.lower().endswith(".json") else yaml.safe_load(raw)
    resume = parse_resume_data(data)
except (UnicodeDecodeError, ValueError, ValidationError, yaml.YAMLError) as e:
    logger.warning("Rejected resume record %s: %s", uploaded.name, e)
    st.error("Could not read this resume record.")
    st.stop()

record_key = upload_key(uploaded.getvalue())

# ---------------------------------------------------------------------------
# Outline preview
# ---------------------------------------------------------------------------

model = compile_resume(resume, config)
with st.expander("Outline", expanded=True):
    for line in outline_markdown(model):
        st.markdown(line)

# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


def _notify(result: ExportResult) -> None:
    if result.ok:
        st.session_state["artifact"] = (record_key, result.artifact)
        st.success("Word document generated.")
    else:
        st.session_state.pop("artifact", None)
        st.error("Failed to generate Word document.")


if st.button("Export to Word", type="primary"):
    export_resume_to_docx(resume, config=config, notify=_notify)

# An artifact built from a previously uploaded record is never offered.
stored = st.session_state.get("artifact")
if stored is not None and stored[0] != record_key:
    st.session_state.pop("artifact", None)
    stored = None

if stored is not None:
    artifact = stored[1]
    st.download_button(
        label="Download DOCX",
        data=artifact.data,
        file_name=artifact.filename,
        mime=artifact.media_type,
        type="secondary",
    )

"""Document scan screen renderer."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from models import ScanState
from services.capture_service import CapturePipeline
from ui_components import back_button
from utils_streamlit import show_service_failure

GALLERY_TYPES = ["png", "jpg", "jpeg", "gif", "webp", "bmp"]


def _render_capturing(pipeline: CapturePipeline) -> None:
    st.caption("Position the document within the frame")
    flash_label = "Flash: on" if pipeline.flash_enabled else "Flash: off"
    col_flash, col_capture = st.columns(2)
    if col_flash.button(flash_label, key="scan_flash"):
        pipeline.toggle_flash()
        st.rerun()
    if col_capture.button("Capture", key="scan_capture", type="primary"):
        pipeline.capture()
        st.rerun()

    uploaded = st.file_uploader("Choose from gallery", type=GALLERY_TYPES, key="scan_gallery")
    if uploaded is not None and not pipeline.reading:
        upload_id = getattr(uploaded, "file_id", None) or uploaded.name
        if st.session_state.get("scan_last_upload") != upload_id:
            st.session_state.scan_last_upload = upload_id
            pipeline.pick_from_gallery(uploaded, name=uploaded.name)
            st.rerun()
    if pipeline.reading:
        st.caption("Reading file…")
    show_service_failure(pipeline.last_failure, key="scan_read_failure")


def _render_preview(pipeline: CapturePipeline) -> None:
    image = pipeline.session.image
    if image is not None:
        st.image(image.as_data_url(), width="stretch")
    show_service_failure(pipeline.last_failure, key="scan_ocr_failure")
    col_retake, col_analyze = st.columns(2)
    if col_retake.button("Retake", key="scan_retake"):
        pipeline.retake()
        st.session_state.pop("scan_last_upload", None)
        st.rerun()
    label = "Retry OCR Analysis" if pipeline.last_failure else "OCR Analysis"
    if col_analyze.button(label, key="scan_analyze", type="primary"):
        pipeline.analyze()
        st.rerun()


def _render_results(pipeline: CapturePipeline) -> None:
    image = pipeline.session.image
    if image is not None:
        st.image(image.as_data_url(), width=240)
    if pipeline.state is ScanState.ANALYZING:
        st.info("Analyzing document…")
        return
    st.markdown("### Extracted Text")
    st.text(pipeline.session.extracted_text or "")
    if st.button("Scan New", key="scan_new"):
        pipeline.retake()
        st.session_state.pop("scan_last_upload", None)
        st.rerun()


def render_tab(pipeline: CapturePipeline, on_back: Callable[[], bool]) -> None:
    """Render whichever step of the capture workflow is active."""

    if back_button(key="scan_back"):
        st.session_state.pop("scan_last_upload", None)
        on_back()
        st.rerun()
    st.markdown("## Document Scan")

    if pipeline.state is ScanState.CAPTURING:
        _render_capturing(pipeline)
    elif pipeline.state is ScanState.PREVIEWING:
        _render_preview(pipeline)
    else:
        _render_results(pipeline)

"""Reusable Streamlit UI primitives."""

from __future__ import annotations

import html
from typing import Any, Iterable, Mapping, Sequence

import streamlit as st

from content_segments import paragraphs, segment
from models import Message, SegmentKind, SessionCredits


def message_blocks(message: Message) -> list[tuple[str, str]]:
    """Flatten a message into ``(kind, text)`` display blocks.

    User turns render as a single inquiry heading; assistant turns render
    math segments verbatim and split text segments into paragraphs.
    """

    if message.is_user:
        return [("inquiry", f"Inquiry: {message.content}")]
    blocks: list[tuple[str, str]] = []
    for part in segment(message.content):
        if part.kind is SegmentKind.MATH:
            blocks.append(("math", part.content))
            continue
        for paragraph in paragraphs(part.content):
            cleaned = paragraph.strip()
            if cleaned:
                blocks.append(("paragraph", cleaned))
    return blocks


def prepare_metric_rows(metrics: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> list[tuple[str, str]]:
    """Normalize metric entries to ``(label, value)`` rows."""

    rows: list[tuple[str, str]] = []
    if isinstance(metrics, Mapping):
        items = metrics.items()
    else:
        items = metrics or []
    for label, value in items:
        if not label:
            continue
        if isinstance(value, float):
            rows.append((str(label), f"{value:.2f}"))
        else:
            rows.append((str(label), str(value)))
    return rows


def render_message(message: Message, *, st_module=st) -> None:
    """Render one ledger message."""

    for kind, text in message_blocks(message):
        if kind == "inquiry":
            st_module.markdown(f"### {html.escape(text)}")
        elif kind == "math":
            st_module.latex(text)
        else:
            st_module.markdown(text)


def render_credit_pill(credits: SessionCredits, *, st_module=st) -> None:
    st_module.markdown(
        f"<div class='credit-pill'>{html.escape(credits.label())}</div>",
        unsafe_allow_html=True,
    )


def render_metrics_card(
    title: str,
    metrics: Mapping[str, Any] | Iterable[tuple[str, Any]],
    *,
    st_module=st,
) -> None:
    """Render a titled metric group."""

    rows = prepare_metric_rows(metrics)
    if not rows:
        return
    st_module.markdown(f"#### {title}")
    columns = st_module.columns(len(rows))
    for column, (label, value) in zip(columns, rows):
        column.metric(label, value)


def back_button(label: str = "Back", *, key: str, st_module=st) -> bool:
    return bool(st_module.button(f"← {label}", key=key))


def toggle_group(
    label: str,
    options: Sequence[str],
    *,
    key: str,
    default: str | None = None,
    help_text: str | None = None,
    st_module=st,
) -> str:
    """Render a segmented toggle and return the selected option."""

    if default and default in options:
        index = options.index(default)
    else:
        index = 0
    return st_module.radio(
        label,
        options,
        index=index,
        help=help_text,
        key=key,
        horizontal=True,
    )


__all__ = [
    "back_button",
    "message_blocks",
    "prepare_metric_rows",
    "render_credit_pill",
    "render_message",
    "render_metrics_card",
    "toggle_group",
]

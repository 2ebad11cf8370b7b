# app_sections/skeletons.py

"""Pulse-animated loading placeholders shown while dashboard data loads"""

import streamlit as st

SKELETON_CSS = """
<style>
@keyframes skeleton-pulse {
    0%, 100% { opacity: 1; }
    50% { opacity: 0.45; }
}
.shimmer-block {
    background: #e2e8f0;
    border-radius: 8px;
    animation: skeleton-pulse 1.6s ease-in-out infinite;
}
.skeleton-card {
    background: white;
    border: 1px solid #f1f5f9;
    border-radius: 2rem;
    padding: 1.5rem;
    margin-bottom: 1.5rem;
}
.skeleton-grid {
    display: grid;
    grid-template-columns: repeat(2, 1fr);
    gap: 0.75rem;
}
.skeleton-cell {
    background: white;
    border: 1px solid #f1f5f9;
    border-radius: 2rem;
    padding: 1rem;
    height: 9rem;
    display: flex;
    flex-direction: column;
    justify-content: space-between;
}
</style>
"""


def shimmer_block(width, height, radius="8px", extra_style=""):
    """A single pulsing grey block"""
    return (
        f"<div class='shimmer-block' style='width:{width};height:{height};"
        f"border-radius:{radius};{extra_style}'></div>"
    )


def skeleton_school_card_html():
    """Placeholder for the school header card"""
    return (
        "<div class='skeleton-card' style='display:flex;justify-content:space-between;gap:1rem;'>"
        "<div style='width:100%;display:flex;flex-direction:column;gap:0.75rem;'>"
        + shimmer_block("6rem", "1rem", "999px")
        + shimmer_block("75%", "2rem", "12px")
        + shimmer_block("50%", "1rem")
        + "</div>"
        + shimmer_block("3.5rem", "3.5rem", "1rem", "flex-shrink:0;")
        + "</div>"
    )


def skeleton_profile_html(rows=3):
    """Placeholder for the profile page: avatar, name and detail rows"""
    detail_rows = "".join(
        "<div style='display:flex;align-items:center;gap:1.25rem;margin-bottom:1.5rem;'>"
        + shimmer_block("3rem", "3rem", "1rem", "flex-shrink:0;")
        + "<div style='flex:1;display:flex;flex-direction:column;gap:0.5rem;'>"
        + shimmer_block("5rem", "0.75rem", "999px")
        + shimmer_block("100%", "1.25rem")
        + "</div></div>"
        for _ in range(rows)
    )
    return (
        "<div style='display:flex;flex-direction:column;align-items:center;padding:1rem;'>"
        + shimmer_block("7rem", "7rem", "50%", "margin:1rem 0 1.5rem 0;")
        + "<div style='display:flex;flex-direction:column;align-items:center;gap:0.75rem;margin-bottom:2rem;'>"
        + shimmer_block("12rem", "2rem", "12px")
        + shimmer_block("8rem", "1.25rem", "999px")
        + "</div>"
        + f"<div class='skeleton-card' style='width:100%;border-radius:2.5rem;'>{detail_rows}</div>"
        + shimmer_block("100%", "3.5rem", "1rem", "max-width:20rem;")
        + "</div>"
    )


def skeleton_widget_html():
    """Placeholder for a small dashboard widget"""
    return (
        "<div class='skeleton-card' style='border-radius:1.5rem;padding:1.25rem;'>"
        + shimmer_block("66%", "1.5rem", "12px")
        + "<div style='display:flex;flex-direction:column;gap:0.75rem;padding-top:1rem;'>"
        + shimmer_block("100%", "0.75rem", "999px")
        + shimmer_block("83%", "0.75rem", "999px")
        + "</div></div>"
    )


def skeleton_period_grid_html(cells=6):
    """Placeholder for the two-column grid of period cards"""
    cell = (
        "<div class='skeleton-cell'>"
        "<div style='display:flex;justify-content:space-between;'>"
        + shimmer_block("3rem", "0.75rem", "999px")
        + shimmer_block("1.25rem", "1.25rem", "50%")
        + "</div>"
        "<div style='display:flex;flex-direction:column;gap:0.5rem;'>"
        + shimmer_block("100%", "1rem")
        + shimmer_block("66%", "0.75rem")
        + "</div>"
        + shimmer_block("100%", "2rem", "12px")
        + "</div>"
    )
    return "<div class='skeleton-grid'>" + cell * cells + "</div>"


def _render(markup, container=None):
    target = container if container is not None else st
    target.markdown(SKELETON_CSS + markup, unsafe_allow_html=True)


def render_skeleton_school_card(container=None):
    _render(skeleton_school_card_html(), container)


def render_skeleton_profile(container=None):
    _render(skeleton_profile_html(), container)


def render_skeleton_widget(container=None):
    _render(skeleton_widget_html(), container)


def render_skeleton_period_grid(container=None):
    _render(skeleton_period_grid_html(), container)

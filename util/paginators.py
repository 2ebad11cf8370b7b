# util/paginators.py

import streamlit as st
import math
import logging
import pandas as pd


logger = logging.getLogger(__name__)


def filter_rows(df, search_term):
    """Rows where any column contains search_term (case-insensitive)"""
    if not search_term or df.empty:
        return df
    mask = df.astype(str).apply(
        lambda row: row.str.contains(search_term, case=False, na=False, regex=False).any(),
        axis=1
    )
    return df[mask]


def page_bounds(total_items, items_per_page, page):
    """
    Start/end slice indices for a page, clamping page into range

    Returns:
        tuple: (page, total_pages, start_idx, end_idx)
    """
    total_pages = math.ceil(total_items / items_per_page) if total_items > 0 else 1
    page = min(max(1, page), total_pages)
    start_idx = (page - 1) * items_per_page
    return page, total_pages, start_idx, min(start_idx + items_per_page, total_items)


def streamlit_paginator(data, table_name, items_per_page=20):
    """
    Searchable, paginated dataframe
    """
    df = pd.DataFrame(data) if not isinstance(data, pd.DataFrame) else data.copy()

    page_key = f"page_{table_name}"
    if page_key not in st.session_state:
        st.session_state[page_key] = 1

    with st.container(border=True):
        search_term = st.text_input(
            "Search",
            key=f"search_input_{table_name}",
            placeholder="Type to search..."
        )
        filtered_df = filter_rows(df, search_term)
        if len(filtered_df) < len(df):
            st.info(f"Found {len(filtered_df)} matching results out of {len(df)} total entries")

        page, total_pages, start_idx, end_idx = page_bounds(
            len(filtered_df), items_per_page, st.session_state[page_key]
        )

        col1, col2, col3 = st.columns([1, 2, 1])
        with col1:
            if st.button("◀", key=f"prev_{table_name}", disabled=page <= 1, use_container_width=True):
                st.session_state[page_key] = page - 1
                st.rerun()
        with col2:
            st.caption(f"Page {page} of {total_pages}")
        with col3:
            if st.button("▶", key=f"next_{table_name}", disabled=page >= total_pages, use_container_width=True):
                st.session_state[page_key] = page + 1
                st.rerun()

    page_data = filtered_df.iloc[start_idx:end_idx]
    if len(page_data) > 0:
        st.dataframe(page_data, use_container_width=True, hide_index=True)
        st.caption(f"Showing {start_idx + 1} – {end_idx} of {len(filtered_df)} entries")
    else:
        st.warning("No results found matching your search criteria.")

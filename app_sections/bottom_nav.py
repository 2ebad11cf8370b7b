# app_sections/bottom_nav.py

"""Two-item bottom navigation bar (Home / Profile)"""

import streamlit as st

NAV_VIEWS = [
    ("home", "Home", "🏠"),
    ("profile", "Profile", "👤"),
]

BOTTOM_NAV_CSS = """
<style>
div[data-testid="stVerticalBlock"]:has(> div.element-container .bottom-nav-marker) {
    position: fixed;
    bottom: 0;
    left: 0;
    right: 0;
    z-index: 50;
    background: rgba(255, 255, 255, 0.85);
    backdrop-filter: blur(12px);
    border-top: 1px solid rgba(226, 232, 240, 0.6);
    padding: 0.5rem 1rem calc(0.5rem + env(safe-area-inset-bottom, 0px)) 1rem;
}
div[data-testid="stVerticalBlock"]:has(> div.element-container .bottom-nav-marker) button p {
    font-size: 11px;
    font-weight: 900;
    text-transform: uppercase;
    letter-spacing: 0.1em;
}
.block-container {
    padding-bottom: 6rem !important;
}
</style>
"""


def nav_items(current_view):
    """
    Describe the navigation buttons

    Args:
        current_view: 'home' or 'profile'

    Returns:
        list: [{view, label, icon, active}]
    """
    return [
        {"view": view, "label": label, "icon": icon, "active": view == current_view}
        for view, label, icon in NAV_VIEWS
    ]


def render_bottom_nav(current_view, on_change_view):
    """
    Render the bottom bar

    Args:
        current_view: Active view
        on_change_view: Called with the view name when a button is clicked
    """
    st.markdown(BOTTOM_NAV_CSS, unsafe_allow_html=True)
    with st.container():
        st.markdown("<span class='bottom-nav-marker'></span>", unsafe_allow_html=True)
        columns = st.columns(len(NAV_VIEWS))
        for col, item in zip(columns, nav_items(current_view)):
            with col:
                st.button(
                    f"{item['icon']} {item['label']}",
                    key=f"bottom_nav_{item['view']}",
                    type="primary" if item["active"] else "secondary",
                    use_container_width=True,
                    on_click=on_change_view,
                    args=(item["view"],),
                )

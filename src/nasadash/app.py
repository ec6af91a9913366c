"""NASA Dashboard — Streamlit app for three NASA open data feeds."""

import asyncio
import html

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from nasadash.config import load_settings  # noqa: E402
from nasadash.controller import DashboardController  # noqa: E402
from nasadash.i18n import t  # noqa: E402
from nasadash.log import init_logging  # noqa: E402
from nasadash.models import GalleryStatus, MediaKind, View  # noqa: E402
from nasadash.renderers.html_cards import (  # noqa: E402
    format_date,
    render_gallery_grid,
    render_neo_card,
    render_neo_stats,
)

# --- Settings + logging (once per session) ---
if "settings" not in st.session_state:
    st.session_state.settings = load_settings()
    init_logging(st.session_state.settings.log_level)

_settings = st.session_state.settings
_lang: str = _settings.lang

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="🚀",
    layout="wide",
)

st.markdown(
    """
    <style>
    /* Gallery grid */
    .gallery-grid {
        display: grid;
        grid-template-columns: repeat(auto-fill, minmax(280px, 1fr));
        gap: 1.5rem;
    }
    .gallery-tile {
        position: relative;
        overflow: hidden;
        border-radius: 16px;
        box-shadow: 0 8px 24px rgba(0,0,0,0.15);
    }
    .gallery-tile img {
        width: 100%;
        height: 20rem;
        object-fit: cover;
        display: block;
    }
    .gallery-caption {
        position: absolute;
        inset: auto 0 0 0;
        padding: 1rem 1.2rem;
        background: linear-gradient(to top, rgba(0,0,0,0.9), rgba(0,0,0,0));
    }
    .gallery-title { color: #ffffff; font-weight: 700; margin: 0; }
    .gallery-center { color: #e5e7eb; font-size: 0.85rem; margin: 0.2rem 0 0; }
    .gallery-date { color: #d1d5db; font-size: 0.75rem; margin: 0.1rem 0 0; }
    /* NEO stats + cards */
    .neo-stats {
        display: grid;
        grid-template-columns: repeat(3, 1fr);
        gap: 1.5rem;
        margin-bottom: 2rem;
    }
    .neo-stat {
        border: 2px solid #bfdbfe;
        border-radius: 16px;
        padding: 1.5rem;
    }
    .neo-stat.stat-hazardous { border-color: #fecaca; }
    .neo-stat-label {
        color: #4b5563;
        font-size: 0.8rem;
        font-weight: 600;
        text-transform: uppercase;
        margin: 0;
    }
    .neo-stat-value { color: #2563eb; font-size: 2.5rem; font-weight: 700; margin: 0; }
    .stat-hazardous .neo-stat-value { color: #dc2626; }
    .neo-card {
        border: 2px solid #dbeafe;
        border-radius: 16px;
        padding: 1.5rem 2rem;
        margin-bottom: 1.2rem;
    }
    .neo-card-head { display: flex; justify-content: space-between; align-items: start; }
    .neo-badge {
        background: #fee2e2;
        color: #b91c1c;
        border: 2px solid #fca5a5;
        border-radius: 999px;
        padding: 0.3rem 0.9rem;
        font-size: 0.8rem;
        font-weight: 700;
    }
    .neo-fields { display: grid; grid-template-columns: 1fr 1fr; gap: 1rem; }
    .neo-field-label { color: #6b7280; font-weight: 600; margin: 0; }
    .neo-field-value { color: #111827; font-weight: 700; font-size: 1.1rem; margin: 0; }
    /* Footer */
    .dash-footer { text-align: center; color: #6b7280; margin-top: 4rem; }
    .dash-footer small { color: #9ca3af; }
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Session state initialization ---
if "controller" not in st.session_state:
    controller = DashboardController.from_settings(_settings)
    with st.spinner(t("loading", _lang)):
        asyncio.run(controller.initialize())
    st.session_state.controller = controller

_controller: DashboardController = st.session_state.controller

# --- Header ---
st.title(f"🚀 {t('page_title', _lang)}")
st.caption(t("subtitle", _lang))

# --- View selector ---
_TAB_LABELS = {
    View.DAILY_FEATURE: t("tab_apod", _lang),
    View.GALLERY: t("tab_gallery", _lang),
    View.NEAR_EARTH_OBJECTS: t("tab_neo", _lang),
}
selected = st.radio(
    "view",
    options=list(_TAB_LABELS),
    index=list(_TAB_LABELS).index(_controller.view),
    format_func=_TAB_LABELS.get,
    horizontal=True,
    label_visibility="collapsed",
)
if selected != _controller.view:
    _controller.select_view(selected)

# --- Picture of the Day ---
if _controller.view is View.DAILY_FEATURE:
    st.header(t("apod_heading", _lang))
    apod = _controller.daily_feature
    if apod is None:
        st.info(t("apod_unavailable", _lang))
    else:
        col_media, col_text = st.columns(2)
        with col_media:
            if apod.media_kind is MediaKind.IMAGE:
                st.image(apod.media_url, caption=apod.title, use_container_width=True)
            else:
                # APOD video URLs are embeddable player pages, not media files
                st.markdown(
                    f"<iframe src='{html.escape(apod.media_url, quote=True)}'"
                    f" title='{html.escape(apod.title)}' width='100%' height='384'"
                    " style='border:0; border-radius:16px;' allowfullscreen></iframe>",
                    unsafe_allow_html=True,
                )
        with col_text:
            st.subheader(apod.title)
            st.markdown(f"📅 {format_date(apod.date)}")
            st.write(apod.explanation)
            if apod.copyright:
                st.caption(f"© {apod.copyright}")

# --- Image gallery ---
elif _controller.view is View.GALLERY:
    st.header(t("gallery_heading", _lang))
    st.caption(t("gallery_subtitle", _lang))

    with st.form("search_form", clear_on_submit=False):
        col_input, col_btn = st.columns([5, 1])
        with col_input:
            query = st.text_input(
                "query",
                value=_controller.query,
                placeholder=t("search_placeholder", _lang),
                label_visibility="collapsed",
            )
        with col_btn:
            submitted = st.form_submit_button(t("btn_search", _lang), use_container_width=True)

    if submitted and query.strip():
        with st.spinner(t("searching", _lang)):
            asyncio.run(_controller.submit_search(query))
        st.rerun()

    status = _controller.gallery_status
    if status is GalleryStatus.SEARCHING:
        st.info(t("searching", _lang))
    elif status is GalleryStatus.NOT_SEARCHED:
        st.info(t("gallery_not_searched", _lang))
    elif status is GalleryStatus.FAILED:
        st.warning(t("gallery_failed", _lang))
    elif status is GalleryStatus.EMPTY:
        st.info(t("gallery_empty", _lang))
    else:
        st.markdown(render_gallery_grid(_controller.visible_gallery_items), unsafe_allow_html=True)
        if _controller.gallery_has_more:
            label = t("btn_load_more", _lang).format(
                shown=len(_controller.visible_gallery_items),
                total=_controller.gallery_total,
            )
            if st.button(label, key="load_more"):
                _controller.load_more_gallery()
                st.rerun()

# --- Near Earth Objects ---
else:
    st.header(t("neo_heading", _lang))
    neo = _controller.neo_summary
    if neo is None:
        st.info(t("neo_unavailable", _lang))
    else:
        st.markdown(render_neo_stats(neo, _lang), unsafe_allow_html=True)
        for record in neo.records:
            st.markdown(render_neo_card(record, _lang), unsafe_allow_html=True)

# --- Footer ---
_footer = f"<div class='dash-footer'><p>{t('footer_attribution', _lang)}</p>"
if _controller.uses_demo_key:
    _footer += f"<small>{t('footer_demo_key', _lang)}</small>"
_footer += "</div>"
st.markdown(_footer, unsafe_allow_html=True)

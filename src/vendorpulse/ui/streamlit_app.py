"""Streamlit sentiment badge viewer for VendorPulse."""

import json
import logging

import streamlit as st

from vendorpulse.core.config import settings
from vendorpulse.core.errors import VendorPulseError
from vendorpulse.core.lexicon import configured_lexicon
from vendorpulse.core.presentation import BADGE_SIZES, describe_result, render_badge_html
from vendorpulse.core.scoring import analyze_sentiment
from vendorpulse.services.review_client import ReviewService
from vendorpulse.utils.data_prep import coerce_review

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title="VendorPulse — Vendor Sentiment",
    page_icon="😊",
    layout="centered"
)

st.title("😊 VendorPulse — Vendor Sentiment")
st.write("Score a vendor's reviews and preview the sentiment badge shown in the app.")

with st.sidebar:
    st.header("⚙️ Badge")
    sizes = list(BADGE_SIZES)
    default_size = settings.default_badge_size if settings.default_badge_size in sizes else "medium"
    size = st.radio("Badge size", sizes, index=sizes.index(default_size))

    st.header("📥 Source")
    source = st.radio("Reviews from", ["Marketplace API", "Pasted JSON"])

reviews = None

if source == "Marketplace API":
    vendor_id = st.text_input("Vendor ID", value=st.session_state.get("vendor_id", ""))
    if not settings.api_url:
        st.caption("No API URL configured (VENDORPULSE_API_URL); mock reviews will be used.")
    if st.button("📊 Score Vendor") and vendor_id:
        st.session_state["vendor_id"] = vendor_id
        try:
            with st.spinner("Fetching reviews..."):
                reviews = ReviewService().get_vendor_reviews(vendor_id)
        except VendorPulseError as e:
            logger.error(f"Review fetch failed for vendor {vendor_id}: {e}")
            st.error(f"Could not fetch reviews: {e}")
else:
    raw = st.text_area(
        "Reviews JSON",
        value='[{"rating": 5, "comment": "excellent and professional"}]',
        height=180,
    )
    if st.button("📊 Score Reviews"):
        try:
            data = json.loads(raw)
            if isinstance(data, dict):
                data = data.get("reviews") or []
            reviews = [coerce_review(r) for r in data if isinstance(r, dict)]
        except (json.JSONDecodeError, AttributeError, TypeError) as e:
            st.error(f"Invalid reviews JSON: {e}")

if reviews is not None:
    try:
        lexicon = configured_lexicon()
    except VendorPulseError as e:
        st.error(f"Lexicon could not be loaded: {e}")
        st.stop()

    result = analyze_sentiment(reviews, lexicon)

    st.markdown(render_badge_html(result, size), unsafe_allow_html=True)
    st.caption(describe_result(result))

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Score", f"{result.score}/100")
    with col2:
        st.metric("Confidence", f"{result.confidence}%")
    with col3:
        st.metric("Average Rating", f"{result.average_rating:.1f}/5")
    with col4:
        st.metric("Reviews", result.review_count)

    with st.expander("🔎 Result payload"):
        st.json(result.to_dict())

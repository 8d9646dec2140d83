"""
HackResults UI Theme - Dark design system with teal and gold accents.

Provides CSS injection and HTML snippets for the Streamlit app.
"""
from html import escape

# Color palette
COLORS = {
    "bg_primary": "#050505",
    "bg_secondary": "#111111",
    "bg_card": "rgba(17, 17, 17, 0.7)",
    "accent": "#00d4aa",
    "gold": "#f5a623",
    "text_primary": "#ffffff",
    "text_secondary": "#a3a3a3",
    "text_muted": "#737373",
    "border": "#252525",
}

MAIN_CSS = """
<style>
@import url('https://fonts.googleapis.com/css2?family=DM+Sans:wght@400;500;700&family=Instrument+Serif&family=Space+Mono:wght@400;700&display=swap');

/* ---- Global ---- */
.stApp {
    background: radial-gradient(circle at 0% 0%, rgba(0, 212, 170, 0.12) 0%, transparent 40%),
                radial-gradient(circle at 100% 100%, rgba(245, 166, 35, 0.08) 0%, transparent 40%),
                #050505;
    font-family: 'DM Sans', sans-serif;
}

/* ---- Sidebar ---- */
section[data-testid="stSidebar"] {
    background: #0a0a0a;
    border-right: 1px solid #1a1a1a;
}

/* ---- Metric Cards ---- */
.metric-card {
    background: rgba(17, 17, 17, 0.7);
    border: 1px solid #252525;
    border-radius: 16px;
    padding: 1.5rem;
    text-align: center;
}
.metric-value {
    font-family: 'Space Mono', monospace;
    font-size: 2.2rem;
    font-weight: 700;
    color: #ffffff;
    line-height: 1.2;
}
.metric-value.gold { color: #f5a623; }
.metric-label {
    font-family: 'Space Mono', monospace;
    font-size: 0.75rem;
    color: #737373;
    text-transform: uppercase;
    letter-spacing: 0.1em;
    margin-top: 0.5rem;
}

/* ---- Project Cards ---- */
.project-card {
    background: rgba(17, 17, 17, 0.6);
    border: 1px solid #1f1f1f;
    border-radius: 12px;
    padding: 1.1rem 1.3rem;
    margin-bottom: 0.8rem;
    transition: border-color 0.15s ease;
}
.project-card:hover { border-color: #333333; }
.project-title {
    font-family: 'Instrument Serif', serif;
    font-size: 1.5rem;
    color: #ffffff;
    line-height: 1.1;
}
.project-tagline {
    font-size: 0.9rem;
    color: #a3a3a3;
    margin-top: 0.35rem;
    line-height: 1.45;
}
.project-meta {
    font-family: 'Space Mono', monospace;
    font-size: 0.75rem;
    color: #737373;
    margin-top: 0.6rem;
}
.prize { color: #f5a623; font-weight: 700; }

/* ---- Chips ---- */
.chip {
    display: inline-block;
    border-radius: 999px;
    padding: 0.15rem 0.7rem;
    font-size: 0.72rem;
    margin: 0.35rem 0.35rem 0 0;
    border: 1px solid rgba(0, 212, 170, 0.3);
    background: rgba(0, 212, 170, 0.1);
    color: #00d4aa;
}
.chip.track {
    border-color: rgba(245, 166, 35, 0.3);
    background: rgba(245, 166, 35, 0.1);
    color: #f5a623;
}

/* ---- Award Cards ---- */
.award-card {
    border-left: 3px solid #f5a623;
    background: rgba(17, 17, 17, 0.6);
    border-radius: 0 12px 12px 0;
    padding: 0.9rem 1.2rem;
    margin-bottom: 0.6rem;
}
.award-amount {
    font-family: 'Space Mono', monospace;
    font-size: 1.3rem;
    font-weight: 700;
    color: #f5a623;
}

/* ---- Inputs ---- */
.stTextInput > div > div {
    background: rgba(17, 17, 17, 0.8);
    border: 1px solid #252525;
    border-radius: 12px;
}
.stTextInput > div > div:focus-within {
    border-color: #00d4aa;
}

/* ---- Dividers ---- */
hr {
    border-color: #1f1f1f;
}

/* ---- Hero Section ---- */
.hero-title {
    font-family: 'Instrument Serif', serif;
    font-size: 2.6rem;
    color: #ffffff;
    margin-bottom: 0.2rem;
}
.hero-title span { color: #00d4aa; }
.hero-subtitle {
    font-size: 1rem;
    color: #737373;
    margin-bottom: 2rem;
}
</style>
"""


def inject_css():
    """Inject the theme CSS into Streamlit."""
    import streamlit as st
    st.markdown(MAIN_CSS, unsafe_allow_html=True)


def hero(title, subtitle=""):
    """Page heading."""
    return (
        f'<div class="hero-title">{escape(title)}</div>'
        f'<div class="hero-subtitle">{escape(subtitle)}</div>'
    )


def metric_card(value, label, gold=False):
    """Render a metric card."""
    value_cls = "metric-value gold" if gold else "metric-value"
    return f"""
    <div class="metric-card">
        <div class="{value_cls}">{escape(str(value))}</div>
        <div class="metric-label">{escape(label)}</div>
    </div>
    """


def chips(values, kind=""):
    """Render sponsor (default) or track chips."""
    cls = f"chip {kind}".strip()
    return "".join(f'<span class="{cls}">{escape(v)}</span>' for v in values)


def project_card(name, tagline="", total_usd=0, award_count=0, sponsors=(), tracks=(), builders=()):
    """Render a project result card."""
    meta_parts = []
    if total_usd:
        meta_parts.append(f'<span class="prize">${total_usd:,.0f}</span> total')
    if award_count:
        meta_parts.append(f"{award_count} award{'s' if award_count != 1 else ''}")
    if builders:
        shown = ", ".join(escape(b) for b in builders[:3])
        extra = f" +{len(builders) - 3}" if len(builders) > 3 else ""
        meta_parts.append(f"{shown}{extra}")
    meta = " · ".join(meta_parts)

    tagline_html = ""
    if tagline:
        tagline_html = f'<div class="project-tagline">{escape(tagline)}</div>'

    return f"""
    <div class="project-card">
        <div class="project-title">{escape(name)}</div>
        {tagline_html}
        <div>{chips(sponsors)}{chips(tracks, "track")}</div>
        <div class="project-meta">{meta}</div>
    </div>
    """


def award_card(sponsor, amount, track=None, bounty_description=None):
    """Render a single award."""
    track_html = chips([track], "track") if track else ""
    desc_html = ""
    if bounty_description:
        desc_html = f'<div class="project-tagline">{escape(bounty_description)}</div>'
    return f"""
    <div class="award-card">
        <div class="award-amount">{escape(amount)}</div>
        <div style="color:{COLORS['text_primary']};margin-top:0.2rem">{escape(sponsor)}</div>
        {track_html}
        {desc_html}
    </div>
    """


def empty_state(message, icon="🔎"):
    """Render a centered placeholder for an empty result list."""
    return (
        '<div class="project-card" style="text-align:center;padding:3rem">'
        f'<div style="font-size:3rem;margin-bottom:1rem">{icon}</div>'
        f'<div style="color:{COLORS["text_secondary"]}">{escape(message)}</div>'
        '</div>'
    )

"""
HackResults - Results browser for the Zypherpunk hackathon

Winning projects, sponsors and tracks with:
- Award and sponsor data loaded from JSON snapshots
- Devfolio GraphQL client for project details (builders, hashtags, media)
- Fuzzy search with weighted fields, sponsor/track/prize filters and sorting
- Social preview (OG) images rendered with Pillow
- Streamlit browser (overview, projects, sponsors, tracks)

Modules:
    core        - Configuration, pydantic schemas
    data        - Awards repository, sponsor directory, alias tables, dataset assembly
    scrapers    - Devfolio API client
    search      - Search records, fuzzy index, filters, sorting, query controller
    og          - OG image renderer and per-page cards
    ui          - Streamlit pages + theme
"""

__version__ = "0.3.0"

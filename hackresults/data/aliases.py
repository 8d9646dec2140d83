"""
Hand-maintained alias tables.

Award records and sponsors.json spell sponsors and tracks differently; these
tables map the variants seen in the data onto each other.
"""

# Award sponsor name -> sponsor id in sponsors.json
SPONSOR_NAME_ALIASES: dict[str, str] = {
    "NEAR": "near",
    "Near": "near",
    "near": "near",
    "Tachyon": "tachyon",
    "Project Tachyon": "tachyon",
    "Starknet": "starknet",
    "Network School": "network-school",
    "Mina": "mina",
    "Mina Protocol": "mina",
    "Axelar": "axelar",
    "Axelar Network": "axelar",
    "Arcium": "arcium",
    "Aztec": "aztec",
    "Aztec Labs": "aztec",
    "ECC": "ecc",
    "ECC (Electric Coin Company)": "ecc",
    "Electric Coin Company": "ecc",
    "Osmosis": "osmosis",
    "Miden": "miden",
    "Fhenix": "fhenix",
    "Helius": "helius",
    "Zcash Community Grants": "zcash-grants",
    "ZCG": "zcash-grants",
    "Nillion": "nillion",
    "Unstoppable Wallet": "unstoppable-wallet",
    "Unstoppable": "unstoppable-wallet",
    "Pump Fun": "pump-fun",
    "Pump.fun": "pump-fun",
    "Gemini": "gemini",
    "Bitlux": "bitlux",
    "RayBot": "raybot",
    "Raybot": "raybot",
    "Noah": "noah",
    "Noah by Plena Finance": "noah",
    "Star": "star",
    "Mintlify": "mintlify",
    "Alliance": "alliance",
    "Alliance DAO": "alliance",
}

# Lowercased track name (projects.json) -> lowercased bounty track names (sponsors.json)
TRACK_NAME_ALIASES: dict[str, list[str]] = {
    "content": ["privacy-focused content & media", "private focused content & media"],
    "privacy-focused content & media": ["content", "private focused content & media"],
    "private focused content & media": ["content", "privacy-focused content & media"],
    "cross-chain privacy solutions": ["cross-chain"],
    "private payments & transactions": ["private payments", "private payments and transactions"],
    "private payments": ["private payments & transactions", "private payments and transactions"],
    "private payments and transactions": ["private payments & transactions", "private payments"],
    "privacy infrastructure & developer tools": ["developer tools", "infrastructure"],
    "self-custody & wallet innovation": ["wallet", "wallets"],
    "private defi & trading": ["defi", "trading"],
    "zcash data & analytics": ["data", "analytics"],
    "creative privacy applications": ["creative"],
    "privacy-preserving ai & computation": ["ai", "computation"],
}

ALL_TRACKS = "all tracks"

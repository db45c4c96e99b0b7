"""Baked sample content shown until a real research backend is connected."""

from __future__ import annotations

from datetime import date

from models import MediaKind, Resource, ResourceStatus, Screen, VaultItem, VaultKind

CHAT_SEED: tuple[tuple[str, str, int], ...] = (
    # (role, content, seconds before session start)
    ("user", "The impact of dark matter on galaxy rotation", 300),
    (
        "assistant",
        "The influence of dark matter on galactic rotation curves represents one of the most "
        "compelling pieces of evidence for its existence. In classical Newtonian mechanics, we "
        "would expect orbital velocities to decrease with distance from the galactic center, "
        "following the relation v ∝ r^(-1/2).\n\n"
        "However, observations reveal that rotation curves remain remarkably flat at large radii, "
        "suggesting the presence of an extended dark matter halo. This discrepancy can be "
        "understood through the virial theorem and the mass distribution within galaxies.\n\n"
        "The observed flat rotation curves indicate that the enclosed mass M(r) grows linearly "
        "with radius, rather than remaining constant beyond the visible disk. This implies a "
        "density profile ρ(r) ∝ r^(-2) for the dark matter halo, consistent with NFW "
        "(Navarro-Frenk-White) profiles derived from cosmological simulations.",
        290,
    ),
    ("user", "Can you show me the mathematical formulation?", 120),
    (
        "assistant",
        "Certainly. The rotation curve is determined by the circular velocity at radius r, which "
        "for a spherically symmetric mass distribution is given by:\n\n"
        "$$v_c(r) = \\sqrt{\\frac{GM(r)}{r}}$$\n\n"
        "For a flat rotation curve where v_c = constant, we require:\n\n"
        "$$M(r) \\propto r$$\n\n"
        "This implies a density profile:\n\n"
        "$$\\rho(r) = \\frac{1}{4\\pi r^2}\\frac{dM}{dr} \\propto \\frac{1}{r^2}$$\n\n"
        "The NFW profile, which fits observational data well, is expressed as:\n\n"
        "$$\\rho_{NFW}(r) = \\frac{\\rho_0}{\\frac{r}{r_s}(1 + \\frac{r}{r_s})^2}$$\n\n"
        "where ρ₀ is a characteristic density and r_s is a scale radius. This profile naturally "
        "produces the observed flat rotation curves in the intermediate radial regime.",
        110,
    ),
)

SIMULATED_REPLY = (
    "This is a simulated response. In a real implementation, this would connect to your AI "
    "research assistant."
)

SIMULATED_OCR_TEXT = """Dark Matter and Galaxy Rotation Curves

The discrepancy between the observed rotation curves of galaxies and those predicted by Newtonian dynamics provides compelling evidence for the existence of dark matter.

In classical mechanics, we expect orbital velocities to decrease with distance from the galactic center according to:

v(r) ∝ r^(-1/2)

However, observations reveal that rotation curves remain remarkably flat at large radii, suggesting the presence of an extended dark matter halo.

Key Points:
• Flat rotation curves indicate M(r) ∝ r
• Implies density profile ρ(r) ∝ r^(-2)
• Consistent with NFW (Navarro-Frenk-White) profiles

This observational evidence, first noted by Vera Rubin and Kent Ford in the 1970s, remains one of the strongest indicators of dark matter's existence."""

CAMERA_FRAME_URL = "https://images.unsplash.com/photo-1456324504439-367cee3b3c32?w=800&q=80"

VAULT_ITEMS: tuple[VaultItem, ...] = (
    VaultItem(
        id="1",
        kind=VaultKind.INQUIRY,
        title="Dark matter and galaxy rotation curves",
        preview=(
            "The influence of dark matter on galactic rotation curves represents one of the most "
            "compelling pieces..."
        ),
        created_on=date(2026, 1, 21),
        tags=("Physics", "Astrophysics", "Dark Matter"),
    ),
    VaultItem(
        id="2",
        kind=VaultKind.DOCUMENT,
        title="NFW Profile Analysis",
        preview=(
            "Navarro-Frenk-White density profile for dark matter halos. Mathematical formulation "
            "and observational evidence..."
        ),
        created_on=date(2026, 1, 20),
        tags=("Physics", "Formula", "Analysis"),
    ),
    VaultItem(
        id="3",
        kind=VaultKind.INQUIRY,
        title="Quantum entanglement principles",
        preview=(
            "Discussion on Bell's theorem and its implications for quantum mechanics and local "
            "realism..."
        ),
        created_on=date(2026, 1, 19),
        tags=("Physics", "Quantum Mechanics"),
    ),
    VaultItem(
        id="4",
        kind=VaultKind.NOTE,
        title="Renaissance Art Movements",
        preview=(
            "Comparative analysis of Italian Renaissance and Northern Renaissance artistic "
            "techniques and philosophies..."
        ),
        created_on=date(2026, 1, 18),
        tags=("History", "Art", "Renaissance"),
    ),
    VaultItem(
        id="5",
        kind=VaultKind.INQUIRY,
        title="Computational complexity theory",
        preview=(
            "Exploration of P vs NP problem and its implications for computer science and "
            "cryptography..."
        ),
        created_on=date(2026, 1, 17),
        tags=("Computer Science", "Mathematics", "Theory"),
    ),
    VaultItem(
        id="6",
        kind=VaultKind.DOCUMENT,
        title="Climate Change Data Analysis",
        preview="Statistical analysis of temperature trends and CO2 levels over the past century...",
        created_on=date(2026, 1, 16),
        tags=("Science", "Statistics", "Environment"),
    ),
)

RESOURCES: tuple[Resource, ...] = (
    Resource("1", "Dark_Matter_Review.pdf", MediaKind.PDF, ResourceStatus.ANALYZED),
    Resource("2", "Galaxy_Rotation.pdf", MediaKind.PDF, ResourceStatus.REFERENCED),
    Resource("3", "NFW_Profile_Diagram.png", MediaKind.IMAGE, ResourceStatus.ANALYZED),
)

ACTIVE_PROJECT = {
    "label": "Active Project",
    "title": "SolveLens AI: Physics Analysis",
    "summary": (
        "Quantum mechanics problem solving with real-time step-by-step analysis. Currently "
        "processing advanced wave function calculations and eigenvalue problems."
    ),
    "queries_today": 12,
    "updated": "Last updated 23 min ago",
}

GRID_MENU: tuple[dict[str, object], ...] = (
    {"id": "inquiry", "title": "New Inquiry", "description": "Start a deep research conversation", "target": Screen.CHAT},
    {"id": "scan", "title": "Document Scan", "description": "Camera & OCR analysis", "target": Screen.SCAN},
    {"id": "vault", "title": "Research Vault", "description": "History & saved notes", "target": Screen.VAULT},
    {"id": "insights", "title": "Academic Insights", "description": "AI-generated statistics", "target": Screen.INSIGHTS},
)

RECENT_ACTIVITY: tuple[dict[str, str], ...] = (
    {"id": "1", "query": "Schrödinger equation derivation for hydrogen atom", "category": "Physics", "time": "2 hours ago", "tag": "#Physics"},
    {"id": "2", "query": "Modal logic and possible worlds semantics", "category": "Logic", "time": "5 hours ago", "tag": "#Logic"},
    {"id": "3", "query": "Fourier transform applications in signal processing", "category": "Mathematics", "time": "1 day ago", "tag": "#Mathematics"},
    {"id": "4", "query": "Thermodynamic entropy vs information entropy comparison", "category": "Physics", "time": "1 day ago", "tag": "#Physics"},
    {"id": "5", "query": "Gödel's incompleteness theorems proof structure", "category": "Logic", "time": "2 days ago", "tag": "#Logic"},
)

INQUIRY_DISTRIBUTION: tuple[dict[str, object], ...] = (
    {"category": "Physics", "count": 12, "percentage": 35},
    {"category": "Mathematics", "count": 8, "percentage": 23},
    {"category": "Computer Science", "count": 7, "percentage": 20},
    {"category": "History", "count": 5, "percentage": 15},
    {"category": "Other", "count": 2, "percentage": 7},
)

PROGRESS_OVER_TIME: tuple[dict[str, object], ...] = (
    {"week": "Week 1", "complexity": 3.2, "activity": 5},
    {"week": "Week 2", "complexity": 3.8, "activity": 7},
    {"week": "Week 3", "complexity": 4.1, "activity": 8},
    {"week": "Week 4", "complexity": 4.5, "activity": 12},
    {"week": "Week 5", "complexity": 4.8, "activity": 10},
    {"week": "Week 6", "complexity": 5.2, "activity": 15},
)

RESOURCE_UTILIZATION: tuple[dict[str, object], ...] = (
    {"type": "PDFs", "count": 18},
    {"type": "Images", "count": 12},
    {"type": "Notes", "count": 24},
)

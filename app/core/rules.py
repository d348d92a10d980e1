from typing import Tuple

# --- Waste-Prone Ingredients ---
# Perishables that spoil within days of purchase. Matched as loose fragments
# ("fresh strawberries" hits "strawberries", "greens" hits "mixed greens").
WASTE_PRONE_INGREDIENTS: Tuple[str, ...] = (
    "lettuce", "spinach", "kale", "arugula", "mixed greens", "herbs",
    "berries", "strawberries", "raspberries", "blueberries", "blackberries",
    "banana", "avocado", "tomato", "cucumber", "mushrooms",
    "milk", "yogurt", "cream", "soft cheese",
    "bread", "fresh pasta", "prepared meals",
    "fish", "seafood", "ground meat",
)

# --- Waste Reduction Scoring ---
# (max days left, points) bands, checked in order. Anything past the last
# band earns nothing.
EXPIRY_POINT_BANDS: Tuple[Tuple[int, int], ...] = (
    (-1, 50),   # already expired
    (1, 40),    # expires today/tomorrow
    (3, 30),    # expires soon
    (7, 20),    # expires this week
)

# --- Tags ---
TAG_USES_EXPIRING = "Uses Expiring Items"
TAG_RESCUES_WASTE_PRONE = "Rescues Waste-Prone Items"
TAG_MINIMAL_SHOPPING = "Minimal Shopping"
TAG_FEW_MISSING = "Few Missing Items"
TAG_QUICK_MEAL = "Quick Meal"
TAG_SIMPLE_RECIPE = "Simple Recipe"
TAG_LEFTOVERS = "Great for Leftovers"

LEFTOVER_KEYWORDS: Tuple[str, ...] = ("soup", "stew", "casserole", "curry", "pasta", "salad")

# --- Difficulty ---
DIFFICULTY_EASY = "Easy"
DIFFICULTY_MEDIUM = "Medium"
# (label, max minutes, max ingredients); falls through to DIFFICULTY_DEFAULT.
DIFFICULTY_LEVELS: Tuple[Tuple[str, int, int], ...] = (
    (DIFFICULTY_EASY, 15, 5),
    (DIFFICULTY_MEDIUM, 30, 10),
)
DIFFICULTY_DEFAULT = "Advanced"

# --- Source Queries ---
RANKING_MAXIMIZE_USED = 2
RANKING_MINIMIZE_MISSING = 1

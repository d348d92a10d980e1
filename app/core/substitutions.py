from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class SubstitutionCategory:
    name: str
    # Canonical ingredient -> substitutes in preference order.
    substitutions: Mapping[str, Tuple[str, ...]]


def _category(name: str, table: Dict[str, List[str]]) -> SubstitutionCategory:
    return SubstitutionCategory(
        name=name,
        substitutions=MappingProxyType({key: tuple(subs) for key, subs in table.items()})
    )


# --- Substitution Catalog ---
# Categories are scanned in this order; the first candidate found is the
# fallback suggestion, so order matters.
SUBSTITUTION_CATALOG: Tuple[SubstitutionCategory, ...] = (
    _category("Dairy", {
        "butter": ["margarine", "coconut oil", "olive oil", "applesauce (for baking)", "greek yogurt"],
        "milk": ["almond milk", "soy milk", "oat milk", "coconut milk", "cashew milk", "rice milk"],
        "heavy cream": ["coconut cream", "evaporated milk", "greek yogurt + milk", "cashew cream"],
        "sour cream": ["greek yogurt", "cream cheese", "cottage cheese (blended)", "coconut cream"],
        "cream cheese": ["greek yogurt (strained)", "cottage cheese (blended)", "ricotta", "mascarpone"],
        "yogurt": ["sour cream", "buttermilk", "cottage cheese", "coconut yogurt"],
        "buttermilk": ["milk + lemon juice", "milk + vinegar", "yogurt + water", "sour cream + water"],
        "cheese": ["nutritional yeast", "cashew cheese", "tofu (for ricotta)", "hummus (for spreads)"],
        "parmesan": ["pecorino romano", "grana padano", "nutritional yeast", "breadcrumbs (for texture)"],
        "mozzarella": ["provolone", "white cheddar", "monterey jack", "cashew cheese"],
    }),
    _category("Proteins", {
        "chicken": ["turkey", "pork", "tofu", "tempeh", "seitan", "jackfruit (for pulled texture)"],
        "beef": ["lamb", "bison", "turkey", "mushrooms", "lentils", "black beans", "tempeh"],
        "pork": ["chicken", "turkey", "beef", "tempeh", "mushrooms"],
        "fish": ["tofu", "tempeh", "hearts of palm", "banana blossom", "chickpea flour batter"],
        "eggs": ["flax eggs", "chia eggs", "applesauce", "mashed banana", "silken tofu", "aquafaba"],
        "bacon": ["turkey bacon", "tempeh bacon", "mushroom bacon", "coconut bacon", "smoked paprika"],
    }),
    _category("Vegetables", {
        "onion": ["shallot", "leek", "scallions", "garlic", "onion powder", "chives"],
        "garlic": ["garlic powder", "shallot", "garlic scapes", "onion", "asafoetida"],
        "tomato": ["red bell pepper", "tomato paste", "tomato sauce", "sun-dried tomatoes"],
        "mushrooms": ["eggplant", "zucchini", "tofu", "tempeh", "sun-dried tomatoes"],
        "bell pepper": ["poblano pepper", "anaheim pepper", "tomato", "zucchini"],
        "spinach": ["kale", "swiss chard", "collard greens", "arugula", "bok choy"],
        "kale": ["collard greens", "swiss chard", "spinach", "mustard greens", "cabbage"],
        "zucchini": ["yellow squash", "cucumber", "eggplant", "bell pepper"],
        "eggplant": ["zucchini", "mushrooms", "tofu", "bell pepper"],
        "broccoli": ["cauliflower", "brussels sprouts", "green beans", "asparagus"],
        "cauliflower": ["broccoli", "cabbage", "brussels sprouts", "turnips"],
        "carrots": ["parsnips", "sweet potatoes", "butternut squash", "beets"],
        "celery": ["fennel", "bok choy stems", "water chestnuts", "jicama"],
    }),
    _category("Grains & Starches", {
        "rice": ["quinoa", "cauliflower rice", "barley", "farro", "bulgur", "couscous"],
        "pasta": ["zucchini noodles", "spaghetti squash", "rice noodles", "shirataki noodles"],
        "bread": ["tortillas", "pita", "naan", "crackers", "rice cakes", "lettuce wraps"],
        "flour": ["almond flour", "coconut flour", "oat flour", "rice flour", "chickpea flour"],
        "cornstarch": ["arrowroot powder", "tapioca starch", "potato starch", "flour"],
        "breadcrumbs": ["crushed crackers", "oats", "crushed nuts", "panko", "crushed cereal"],
        "oats": ["quinoa flakes", "rice", "buckwheat", "millet", "barley"],
        "potatoes": ["sweet potatoes", "cauliflower", "turnips", "rutabaga", "parsnips"],
    }),
    _category("Condiments & Sauces", {
        "soy sauce": ["tamari", "coconut aminos", "worcestershire sauce", "liquid aminos"],
        "worcestershire": ["soy sauce + vinegar", "fish sauce", "tamari + molasses"],
        "ketchup": ["tomato paste + vinegar + sugar", "barbecue sauce", "sriracha"],
        "mayonnaise": ["greek yogurt", "sour cream", "avocado", "hummus", "tahini"],
        "mustard": ["horseradish", "wasabi", "mayonnaise + turmeric", "hot sauce"],
        "vinegar": ["lemon juice", "lime juice", "wine", "citric acid"],
        "hot sauce": ["cayenne pepper", "red pepper flakes", "sriracha", "harissa", "gochujang"],
    }),
    _category("Herbs & Spices", {
        "basil": ["oregano", "thyme", "parsley", "cilantro", "mint"],
        "oregano": ["basil", "thyme", "marjoram", "italian seasoning"],
        "thyme": ["oregano", "basil", "marjoram", "rosemary", "sage"],
        "rosemary": ["thyme", "sage", "oregano", "tarragon"],
        "cilantro": ["parsley", "basil", "dill", "mint", "oregano"],
        "parsley": ["cilantro", "basil", "chervil", "dill", "celery leaves"],
        "dill": ["tarragon", "fennel fronds", "parsley", "basil"],
        "ginger": ["galangal", "turmeric", "cardamom", "allspice"],
        "cinnamon": ["nutmeg", "allspice", "cardamom", "ginger"],
        "nutmeg": ["cinnamon", "mace", "allspice", "ginger"],
        "paprika": ["cayenne + sweet pepper", "chili powder", "hot sauce"],
        "cumin": ["coriander", "caraway", "chili powder", "garam masala"],
    }),
    _category("Baking", {
        "baking powder": ["baking soda + cream of tartar", "self-rising flour"],
        "baking soda": ["baking powder (3x amount)", "potassium bicarbonate"],
        "vanilla extract": ["vanilla bean", "almond extract", "maple syrup", "honey"],
        "sugar": ["honey", "maple syrup", "agave nectar", "stevia", "coconut sugar"],
        "brown sugar": ["white sugar + molasses", "coconut sugar", "honey", "maple syrup"],
        "molasses": ["honey", "maple syrup", "brown sugar", "dark corn syrup"],
        "chocolate chips": ["cocoa powder + butter", "carob chips", "chopped chocolate bar"],
        "cocoa powder": ["melted chocolate", "carob powder", "hot chocolate mix"],
    }),
    _category("Citrus & Acids", {
        "lemon juice": ["lime juice", "vinegar", "citric acid", "orange juice + vinegar"],
        "lime juice": ["lemon juice", "vinegar", "grapefruit juice"],
        "orange juice": ["lemon juice + sugar", "grapefruit juice", "pineapple juice"],
        "lemon zest": ["lime zest", "orange zest", "lemon extract", "dried lemon peel"],
    }),
)

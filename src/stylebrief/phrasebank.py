"""Static phrase banks and tier tables for style briefs.

Everything here is data. Selection lives in ``selector`` and ``assembler``; new
phrasing can be added without touching either.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CombinationRule:
    name: str
    requires: tuple[tuple[str, float], ...]
    phrases: tuple[str, ...]
    multiplier: int = 1
    planetary_days: frozenset[str] = field(default_factory=frozenset)
    moon_phases: frozenset[str] = field(default_factory=frozenset)


COMBINATION_MIN_WEIGHT = 0.3
DOMINANT_MIN_WEIGHT = 1.0
PRIMARY_MIN_WEIGHT = 0.05


# Order is significant: the first matching rule wins.
COMBINATION_RULES: tuple[CombinationRule, ...] = (
    CombinationRule(
        name="velvet_indulgence",
        requires=(("luxurious", COMBINATION_MIN_WEIGHT), ("sensual", COMBINATION_MIN_WEIGHT)),
        phrases=(
            "Today rewards touch. Reach for the piece that feels best against your skin and let richness do the talking.",
            "Indulgence is the brief. Layer fabrics with weight and lustre, and let one luxurious texture anchor the look.",
            "Dress for the senses today: plush knits, fluid silks, and a finish that invites a second glance.",
        ),
    ),
    CombinationRule(
        name="mars_day_charge",
        requires=(("bold", COMBINATION_MIN_WEIGHT), ("dynamic", COMBINATION_MIN_WEIGHT)),
        planetary_days=frozenset({"Mars"}),
        multiplier=3,
        phrases=(
            "Mars has the day and your wardrobe should know it. Sharp lines, saturated colour, nothing apologetic.",
            "Move fast and dress for momentum. Pick pieces that let you stride, and one colour that announces you.",
        ),
    ),
    CombinationRule(
        name="full_moon_glow",
        requires=(("radiant", COMBINATION_MIN_WEIGHT), ("luminous", COMBINATION_MIN_WEIGHT)),
        moon_phases=frozenset({"full", "waxing_gibbous"}),
        multiplier=5,
        phrases=(
            "The moon is bright and so are you. Let light catch something you wear: sheen, shimmer, or a pale glowing tone.",
            "A high-visibility day. Wear the piece you usually save, and let it reflect the light back.",
            "Glow is the point today. Choose finishes that hold light and colours that warm the face.",
        ),
    ),
    CombinationRule(
        name="dream_drift",
        requires=(("dreamy", COMBINATION_MIN_WEIGHT), ("fluid", COMBINATION_MIN_WEIGHT)),
        multiplier=7,
        phrases=(
            "Let things drape today. Soft edges, washed colour, and fabric that moves a beat after you do.",
            "A watercolour kind of day. Blend tones instead of contrasting them and keep silhouettes unstructured.",
        ),
    ),
    CombinationRule(
        name="disciplined_line",
        requires=(("structured", COMBINATION_MIN_WEIGHT), ("disciplined", COMBINATION_MIN_WEIGHT)),
        multiplier=11,
        phrases=(
            "Precision is your power move. Tailoring, clean seams, and a palette you could wear to any meeting.",
            "Build the outfit like an argument: strong foundation, no wasted words, one detail that proves the point.",
        ),
    ),
    CombinationRule(
        name="future_signal",
        requires=(("innovative", COMBINATION_MIN_WEIGHT), ("electric", COMBINATION_MIN_WEIGHT)),
        multiplier=13,
        phrases=(
            "Break one rule on purpose today. An unexpected pairing or a technical fabric will feel exactly right.",
            "Wear something that looks like next season. Odd proportions and a jolt of colour are on your side.",
        ),
    ),
    CombinationRule(
        name="soft_shelter",
        requires=(("nurturing", COMBINATION_MIN_WEIGHT), ("comfortable", COMBINATION_MIN_WEIGHT)),
        multiplier=17,
        phrases=(
            "Comfort is not a compromise today. Choose the softest layers you own and wear them with intent.",
            "Dress like you are looking after yourself: warm neutrals, forgiving cuts, something hand-feel soft.",
        ),
    ),
    CombinationRule(
        name="deep_current",
        requires=(("intense", COMBINATION_MIN_WEIGHT), ("transformative", COMBINATION_MIN_WEIGHT)),
        multiplier=19,
        phrases=(
            "Go darker and deeper. Rich tones and a single strong silhouette carry more weight than any print.",
            "There is magnetism in restraint today. Monochrome depth, one sharp accent, and let the rest stay quiet.",
        ),
    ),
    CombinationRule(
        name="quick_mix",
        requires=(("playful", COMBINATION_MIN_WEIGHT), ("versatile", COMBINATION_MIN_WEIGHT)),
        multiplier=23,
        phrases=(
            "Mix it up. Pieces that switch roles from morning to evening, and a colour that makes you smile.",
            "Play is the plan. Swap the expected accessory for something witty and keep the base easy.",
        ),
    ),
    CombinationRule(
        name="earthbound",
        requires=(("grounded", COMBINATION_MIN_WEIGHT), ("practical", COMBINATION_MIN_WEIGHT)),
        multiplier=29,
        phrases=(
            "Keep it real and well-made. Sturdy fabrics, earthy tones, and shoes you can actually walk in.",
            "Dependable is beautiful today. Reach for the pieces that have earned their place in your wardrobe.",
        ),
    ),
    CombinationRule(
        name="balanced_harmony",
        requires=(("harmonious", COMBINATION_MIN_WEIGHT), ("balanced", COMBINATION_MIN_WEIGHT)),
        multiplier=31,
        phrases=(
            "Aim for proportion. Balance a fitted piece with an easy one and keep the palette tonal.",
            "Harmony over statement today. Colours that sit well together and shapes that agree with each other.",
        ),
    ),
)


DOMINANT_PHRASES: dict[str, tuple[str, ...]] = {
    "bold": (
        "One thing should be loud today. Pick it early and build quietly around it.",
        "Confidence is the accessory. Wear colour like you mean it.",
    ),
    "radiant": (
        "Be seen today. Warm colour near the face and a finish that catches light.",
        "Your presence is turned up. Dress to match it, not to hide it.",
    ),
    "intense": (
        "Depth over brightness. Dark, rich tones and a focused silhouette.",
        "Keep the look concentrated: fewer pieces, stronger choices.",
    ),
    "dreamy": (
        "Soften everything. Blurred edges, gentle colour, and fabric that floats.",
        "Let intuition dress you today; the first thing you reach for is right.",
    ),
    "structured": (
        "Lean on structure. A sharp shoulder or a crisp collar will hold the whole day together.",
        "Clean lines and considered layers. Let the cut do the work.",
    ),
    "innovative": (
        "Try the combination you have been wondering about. Today it lands.",
        "Experiment with proportion; something unfamiliar will feel like you.",
    ),
    "nurturing": (
        "Wrap yourself in softness. Comfort first, polish second.",
        "Choose pieces that feel like care: warm knits and familiar favourites.",
    ),
    "luxurious": (
        "Reach for quality. One beautiful fabric is worth more than three new things.",
        "Invest the outfit in texture. Cashmere, silk, or anything with weight and sheen.",
    ),
    "playful": (
        "Keep it light. A bright accent or a witty detail sets the tone.",
        "Have fun with it today; colour and contrast are on your side.",
    ),
    "grounded": (
        "Keep your feet on the ground. Earth tones, solid fabrics, reliable shapes.",
        "Dress for steadiness: the pieces you trust most.",
    ),
    "fluid": (
        "Go with the drape. Bias cuts, soft trousers, and nothing that pinches.",
        "Let fabric move today; rigid pieces can wait.",
    ),
    "elegant": (
        "Quiet refinement wins today. Tonal dressing and one polished finish.",
        "Edit down until only the elegant pieces remain.",
    ),
    "energetic": (
        "Dress for motion. Pieces you can move in and colour that keeps pace.",
        "High energy day: keep it practical but never dull.",
    ),
    "harmonious": (
        "Match your tones and let the outfit feel effortless.",
        "Balance is the brief; nothing should shout over anything else.",
    ),
}


PRIMARY_SLOT_ORDER: tuple[tuple[str, ...], ...] = (
    ("texture", "color", "mood"),
    ("texture", "mood"),
    ("texture", "color"),
    ("color", "mood"),
)

PRIMARY_TEMPLATES: dict[tuple[str, ...], tuple[str, ...]] = {
    ("texture", "color", "mood"): (
        "Lead with {{ texture }} textures in {{ color }} tones and let a {{ mood }} mood set the pace.",
        "Today leans {{ mood }}: think {{ texture }} fabrics and a {{ color }} thread running through the look.",
        "{{ color|capitalize }} colour, {{ texture }} hand-feel, {{ mood }} attitude. That is the formula today.",
    ),
    ("texture", "mood"): (
        "Reach for {{ texture }} fabrics and carry yourself with a {{ mood }} ease.",
        "A {{ mood }} day calls for {{ texture }} textures close to the skin.",
    ),
    ("texture", "color"): (
        "Build around {{ texture }} fabrics in {{ color }} shades.",
        "{{ texture|capitalize }} textures and a {{ color }} palette will carry the day.",
    ),
    ("color", "mood"): (
        "Let {{ color }} tones lead and keep the overall feeling {{ mood }}.",
        "A {{ mood }} outlook deserves a {{ color }} palette.",
    ),
}


DIRECTIONS: tuple[str, ...] = ("flowing", "grounded", "innovative", "nurturing", "intense", "balanced")

DIRECTION_KEYWORDS: dict[str, frozenset[str]] = {
    "flowing": frozenset({"flowing", "fluid", "dreamy", "soft", "adaptive", "diffused", "light", "airy"}),
    "grounded": frozenset({
        "grounded", "structured", "stable", "practical", "enduring", "substantial",
        "disciplined", "reserved", "anchored", "earthy", "layered",
    }),
    "innovative": frozenset({"innovative", "unique", "unconventional", "futuristic", "progressive", "distinctive", "eclectic"}),
    "nurturing": frozenset({"nurturing", "comfortable", "comforting", "protective", "cozy", "warm", "secure"}),
    "intense": frozenset({"intense", "bold", "powerful", "transformative", "magnetic", "dramatic", "assertive", "energetic"}),
    "balanced": frozenset({"balanced", "harmonious", "elegant", "refined"}),
}

DIRECTION_PHRASES: dict[str, tuple[str, ...]] = {
    "flowing": (
        "Follow the flow today. Soft layers and pieces that move with you.",
        "Keep it loose and fluid; nothing should feel fixed.",
        "Let the outfit breathe. Drape over structure, ease over precision.",
    ),
    "grounded": (
        "Stay rooted. Dependable fabrics and a quietly confident silhouette.",
        "Build on solid ground: good basics, good shoes, nothing fussy.",
        "Steady and well-made wins today.",
    ),
    "innovative": (
        "Try something new. One unexpected choice will refresh everything else.",
        "Play with proportion and let the outfit surprise you.",
        "Today rewards originality; wear the piece nobody else would.",
    ),
    "nurturing": (
        "Be kind to yourself in what you wear. Softness and warmth come first.",
        "Comfort is the foundation today; build up from there.",
        "Choose pieces that feel like a hug.",
    ),
    "intense": (
        "Turn up the contrast. Strong colour or a striking shape takes the lead.",
        "Go bold and commit; half measures will feel flat today.",
        "Dress with intent. Every piece should earn its place.",
    ),
    "balanced": (
        "Aim for equilibrium. Mix structure with softness and keep the palette calm.",
        "Balance is the quiet strength today.",
        "Nothing extreme; a considered, even-handed look is right.",
    ),
}

FLOW_GROUND_TOLERANCE = 0.2

FALLBACK_PHRASES: tuple[str, ...] = (
    "Dress in what feels most like you today. Your instinct is the best stylist you have.",
)

CONFIDENCE_LEADINS: tuple[str, ...] = (
    "The signals are mixed today, so treat this as a gentle nudge. ",
    "Energies are scattered, so hold this loosely. ",
    "Nothing is shouting today; take this as a suggestion. ",
)

CONFIDENCE_CODAS: tuple[str, ...] = (
    " Adjust as the day unfolds.",
    " Let your mood have the final say.",
)


TEXTILE_FABRICS: dict[str, tuple[str, ...]] = {
    "luxurious": ("silk", "cashmere", "anything with a rich hand-feel"),
    "sensual": ("velvet", "satin", "fabrics that invite touch"),
    "soft": ("brushed cotton", "jersey", "soft knits"),
    "fluid": ("crepe", "chiffon", "bias-cut silks"),
    "comfortable": ("jersey", "fleece-backed cotton", "relaxed knits"),
    "nurturing": ("cosy wool", "lambswool", "gentle knits"),
    "cozy": ("chunky knits", "wool", "layered fleece"),
    "breathable": ("linen", "cotton voile", "open weaves"),
    "light": ("linen", "poplin", "lightweight cotton"),
    "crisp": ("crisp poplin", "wool suiting", "starched cotton"),
    "enduring": ("denim", "twill", "heavyweight cotton"),
    "weatherproof": ("waxed cotton", "technical shells", "gabardine"),
    "textured": ("bouclé", "tweed", "ribbed knits"),
    "dreamy": ("tulle", "organza", "washed silk"),
}
TEXTILE_TEMPLATE = "fabrics with a {{ texture }} feel"
TEXTILE_DEFAULT: tuple[str, ...] = ("comfortable natural fibres you enjoy wearing",)

# Weather fabric filter. Matching is by substring, so "wool" also catches "lambswool".
HOT_THRESHOLD = 25.0
COLD_THRESHOLD = 10.0
RAIN_WORDS: tuple[str, ...] = ("rain", "shower", "storm")
WARM_FABRICS: tuple[str, ...] = ("knits", "wool", "cashmere", "fleece", "thick cotton", "heavy jersey")
COOL_FABRICS: tuple[str, ...] = ("linen", "silk", "light cotton", "gauze")
WATERPROOF_FABRICS: tuple[str, ...] = ("water-resistant shells", "coated cotton")

COLOR_TEMPLATE = "{{ color|capitalize }} tones{% if quality %} with a {{ quality }} finish{% endif %}"
COLOR_DEFAULT = "Your favourite neutrals with one accent colour"

SHAPE_PHRASES: dict[str, str] = {
    "structured": "Tailored shoulders and clean, defined lines",
    "fluid": "Draped, relaxed shapes that move with you",
    "expansive": "Wide legs and generous volume",
    "balanced": "Proportioned silhouettes, fitted against relaxed",
    "dynamic": "Asymmetric cuts and angles with movement",
    "protective": "Wrapping, enveloping layers",
    "layered": "Layered lengths with visible depth",
    "versatile": "Pieces that can be worn more than one way",
    "elegant": "Long, elongating lines",
    "innovative": "Unusual proportions and architectural pieces",
}
SHAPE_TEMPLATE = "A {{ structure }} silhouette"
SHAPE_DEFAULT = "Whatever silhouette feels easiest today"

PATTERN_PHRASES: dict[str, str] = {
    "flowing": "Watercolour prints, soft florals or none at all",
    "grounded": "Subtle checks, herringbone and tonal weaves",
    "innovative": "Graphic, abstract or clashing prints",
    "nurturing": "Small, familiar motifs and gentle stripes",
    "intense": "Solid blocks of colour or high-contrast graphics",
    "balanced": "Classic stripes and understated texture",
}

ACCESSORY_PHRASES: dict[str, str] = {
    "classic": "A good watch, leather belt and simple studs",
    "playful": "Colourful earrings, a printed scarf or a fun bag",
    "romantic": "Delicate jewellery, pearls and soft leather",
    "utility": "A practical crossbody, sturdy boots and a useful layer",
    "drama": "One statement piece: a bold cuff, a sculptural earring",
    "edge": "Hardware, mixed metals and something unexpected",
}

TAKEAWAYS: dict[str, tuple[str, ...]] = {
    "classic": (
        "Timeless is always in season.",
        "Quality speaks quietly.",
    ),
    "playful": (
        "Have fun with it.",
        "Joy is a style choice.",
    ),
    "romantic": (
        "Softness is strength.",
        "Wear what feels beautiful.",
    ),
    "utility": (
        "Ready for anything.",
        "Function first, style follows.",
    ),
    "drama": (
        "Make the entrance.",
        "Own the room.",
    ),
    "edge": (
        "Different is the point.",
        "Break one rule today.",
    ),
}


BRIGHT_TOKENS = frozenset({
    "bright", "radiant", "luminous", "light", "airy", "vibrant", "cheerful",
    "fresh", "warm", "glamorous", "optimistic", "exuberant",
})
DARK_TOKENS = frozenset({
    "deep", "intense", "muted", "subdued", "reserved", "reflective",
    "transformative", "magnetic", "diffused",
})
VIVID_TOKENS = frozenset({
    "vibrant", "bold", "electric", "dynamic", "energetic", "playful",
    "expressive", "dramatic", "eclectic", "concentrated",
})
MUTED_TOKENS = frozenset({
    "muted", "subdued", "soft", "subtle", "reserved", "harmonious",
    "balanced", "refined", "diffused", "classic",
})
PHASE_BRIGHTNESS: dict[str, int] = {
    "full": 10,
    "waxing_gibbous": 5,
    "waning_gibbous": 5,
    "new": -10,
    "waning_crescent": -5,
}


__all__ = [
    "ACCESSORY_PHRASES",
    "COMBINATION_RULES",
    "CombinationRule",
    "DIRECTIONS",
    "DIRECTION_KEYWORDS",
    "DIRECTION_PHRASES",
    "DOMINANT_PHRASES",
    "FALLBACK_PHRASES",
    "PRIMARY_TEMPLATES",
    "TAKEAWAYS",
    "TEXTILE_FABRICS",
]

"""Curated Word Builder word lists, one tuple per difficulty tier.

Lists are immutable; a game picks entries by index so it can track which
words of a tier have already been shown.
"""
from __future__ import annotations

from study_games.models import Difficulty, WordBuilderEntry

EASY_WORDS: tuple[WordBuilderEntry, ...] = (
    WordBuilderEntry("bear", "A large, heavy mammal with thick fur"),
    WordBuilderEntry("cake", "A sweet baked dessert"),
    WordBuilderEntry("dark", "Having little or no light"),
    WordBuilderEntry("east", "The direction where the sun rises"),
    WordBuilderEntry("farm", "Land used for growing crops or raising animals"),
    WordBuilderEntry("gate", "A movable barrier in a fence or wall"),
    WordBuilderEntry("hare", "An animal similar to a rabbit"),
    WordBuilderEntry("iron", "A strong, hard metal"),
    WordBuilderEntry("jump", "To push yourself up into the air"),
    WordBuilderEntry("kite", "A toy flown in the wind on a string"),
    WordBuilderEntry("lake", "A large body of fresh water"),
    WordBuilderEntry("mist", "A thin fog or water vapour"),
    WordBuilderEntry("nest", "A structure built by birds for eggs"),
    WordBuilderEntry("open", "Not closed or blocked"),
    WordBuilderEntry("pine", "An evergreen tree with needles"),
    WordBuilderEntry("quiz", "A short test of knowledge"),
    WordBuilderEntry("rain", "Water falling from clouds"),
    WordBuilderEntry("sand", "Tiny grains found on beaches"),
    WordBuilderEntry("tree", "A tall plant with a trunk and branches"),
    WordBuilderEntry("upon", "On top of; on"),
    WordBuilderEntry("vine", "A climbing or trailing plant"),
    WordBuilderEntry("warm", "Having moderate heat"),
    WordBuilderEntry("yarn", "Thread used for knitting"),
    WordBuilderEntry("zone", "An area with specific characteristics"),
    WordBuilderEntry("bark", "The outer covering of a tree"),
    WordBuilderEntry("claw", "A sharp curved nail on an animal"),
    WordBuilderEntry("dawn", "The first light of day"),
    WordBuilderEntry("echo", "A repeated sound caused by reflection"),
    WordBuilderEntry("fern", "A green plant with feathery leaves"),
    WordBuilderEntry("glow", "To give off a steady light"),
    WordBuilderEntry("hill", "A raised area of land, smaller than a mountain"),
    WordBuilderEntry("isle", "A small island"),
    WordBuilderEntry("jade", "A green gemstone"),
    WordBuilderEntry("kelp", "A large brown seaweed"),
    WordBuilderEntry("loom", "A device for weaving fabric"),
    WordBuilderEntry("maze", "A complex network of paths or passages"),
    WordBuilderEntry("oath", "A solemn promise"),
    WordBuilderEntry("pawn", "The smallest chess piece"),
    WordBuilderEntry("reed", "A tall grass that grows in water"),
    WordBuilderEntry("sled", "A vehicle on runners for travelling on snow"),
    WordBuilderEntry("tusk", "A long pointed tooth"),
    WordBuilderEntry("vale", "A valley"),
    WordBuilderEntry("wren", "A small brown songbird"),
    WordBuilderEntry("yoke", "A wooden beam for joining two oxen"),
    WordBuilderEntry("bolt", "A metal pin used to fasten things"),
    WordBuilderEntry("cove", "A small sheltered bay"),
    WordBuilderEntry("dusk", "The time just before nightfall"),
    WordBuilderEntry("flax", "A plant used to make linen"),
    WordBuilderEntry("gust", "A sudden strong wind"),
    WordBuilderEntry("husk", "The outer covering of a seed"),
    WordBuilderEntry("knot", "A fastening made by tying rope"),
    WordBuilderEntry("lamp", "A device that produces light"),
)

MEDIUM_WORDS: tuple[WordBuilderEntry, ...] = (
    WordBuilderEntry("anchor", "A heavy object that holds a ship in place"),
    WordBuilderEntry("branch", "A part of a tree growing from the trunk"),
    WordBuilderEntry("breeze", "A gentle, light wind"),
    WordBuilderEntry("candle", "A cylinder of wax with a wick for light"),
    WordBuilderEntry("castle", "A large fortified building"),
    WordBuilderEntry("centre", "The middle point of something"),
    WordBuilderEntry("colour", "The property of reflecting light of a particular wavelength"),
    WordBuilderEntry("crayon", "A coloured wax stick for drawing"),
    WordBuilderEntry("desert", "A dry, barren area with little rainfall"),
    WordBuilderEntry("falcon", "A bird of prey known for speed"),
    WordBuilderEntry("fibre", "A thread or strand of natural or synthetic material"),
    WordBuilderEntry("fossil", "Preserved remains of an ancient organism"),
    WordBuilderEntry("garden", "An area where plants are cultivated"),
    WordBuilderEntry("gentle", "Mild, kind, or soft in nature"),
    WordBuilderEntry("global", "Relating to the whole world"),
    WordBuilderEntry("harbor", "A sheltered body of water for ships"),
    WordBuilderEntry("honest", "Truthful and sincere"),
    WordBuilderEntry("island", "A piece of land surrounded by water"),
    WordBuilderEntry("jungle", "A dense tropical forest"),
    WordBuilderEntry("kennel", "A shelter for a dog"),
    WordBuilderEntry("launch", "To send forth with force"),
    WordBuilderEntry("marble", "A hard crystalline rock or a small glass ball"),
    WordBuilderEntry("nature", "The natural world and its phenomena"),
    WordBuilderEntry("orange", "A citrus fruit or a colour"),
    WordBuilderEntry("palace", "The official residence of a sovereign"),
    WordBuilderEntry("planet", "A large celestial body orbiting a star"),
    WordBuilderEntry("plough", "A farm tool used to turn soil"),
    WordBuilderEntry("puzzle", "A problem designed for amusement"),
    WordBuilderEntry("quartz", "A hard mineral found in many rocks"),
    WordBuilderEntry("radish", "A small red root vegetable"),
    WordBuilderEntry("salmon", "A large fish prized as food"),
    WordBuilderEntry("shadow", "A dark area produced by blocking light"),
    WordBuilderEntry("silver", "A shiny white precious metal"),
    WordBuilderEntry("stream", "A small, narrow river"),
    WordBuilderEntry("temple", "A building devoted to worship"),
    WordBuilderEntry("throne", "A ceremonial chair for a monarch"),
    WordBuilderEntry("travel", "To go from one place to another"),
    WordBuilderEntry("trophy", "A prize for winning a competition"),
    WordBuilderEntry("tunnel", "An underground passage"),
    WordBuilderEntry("valley", "A low area between hills or mountains"),
    WordBuilderEntry("velvet", "A soft, luxurious fabric"),
    WordBuilderEntry("walrus", "A large Arctic marine mammal with tusks"),
    WordBuilderEntry("winter", "The coldest season of the year"),
    WordBuilderEntry("beaver", "A large rodent that builds dams"),
    WordBuilderEntry("canopy", "An overhanging covering or shelter"),
    WordBuilderEntry("dragon", "A mythical fire-breathing creature"),
    WordBuilderEntry("frosty", "Covered with or producing frost"),
    WordBuilderEntry("glacier", "A slowly moving mass of ice"),
    WordBuilderEntry("honour", "Great respect or high esteem"),
    WordBuilderEntry("meteor", "A streak of light from space debris"),
    WordBuilderEntry("ribbon", "A narrow strip of fabric"),
)

HARD_WORDS: tuple[WordBuilderEntry, ...] = (
    WordBuilderEntry("absolute", "Complete and total; not limited"),
    WordBuilderEntry("backbone", "The spine; the main support"),
    WordBuilderEntry("balcony", "A platform projecting from a building"),
    WordBuilderEntry("blanket", "A large piece of warm fabric for bedding"),
    WordBuilderEntry("borough", "A town or district with local government"),
    WordBuilderEntry("cabinet", "A piece of furniture with shelves or drawers"),
    WordBuilderEntry("captain", "The leader of a team or ship"),
    WordBuilderEntry("century", "A period of one hundred years"),
    WordBuilderEntry("chamber", "A large room or enclosed space"),
    WordBuilderEntry("climate", "The weather conditions in a region over time"),
    WordBuilderEntry("compass", "An instrument showing magnetic north"),
    WordBuilderEntry("courage", "The ability to face danger without fear"),
    WordBuilderEntry("defence", "The act of protecting from attack"),
    WordBuilderEntry("diamond", "A precious gemstone of pure carbon"),
    WordBuilderEntry("dolphin", "An intelligent marine mammal"),
    WordBuilderEntry("eclipse", "An obscuring of light from a celestial body"),
    WordBuilderEntry("economy", "The system of production and trade in a region"),
    WordBuilderEntry("elegant", "Graceful and stylish in appearance"),
    WordBuilderEntry("fantasy", "An imagined situation or sequence of events"),
    WordBuilderEntry("feather", "A flat structure forming a bird's plumage"),
    WordBuilderEntry("forward", "Towards the front; in advance"),
    WordBuilderEntry("freedom", "The state of being free"),
    WordBuilderEntry("gallery", "A room or building for displaying art"),
    WordBuilderEntry("gravity", "The force that attracts objects to Earth"),
    WordBuilderEntry("habitat", "The natural home of an organism"),
    WordBuilderEntry("harbour", "A sheltered port for ships"),
    WordBuilderEntry("horizon", "The line where earth meets sky"),
    WordBuilderEntry("journey", "An act of travelling from one place to another"),
    WordBuilderEntry("justice", "Fairness and moral rightness"),
    WordBuilderEntry("kingdom", "A country ruled by a king or queen"),
    WordBuilderEntry("lantern", "A lamp with a protective case"),
    WordBuilderEntry("library", "A building housing a collection of books"),
    WordBuilderEntry("mammoth", "An extinct large hairy elephant"),
    WordBuilderEntry("mystery", "Something difficult to understand or explain"),
    WordBuilderEntry("narwhal", "An Arctic whale with a long spiral tusk"),
    WordBuilderEntry("nervous", "Easily agitated or anxious"),
    WordBuilderEntry("observe", "To watch carefully; to notice"),
    WordBuilderEntry("octagon", "A shape with eight sides"),
    WordBuilderEntry("orchard", "A piece of land with fruit trees"),
    WordBuilderEntry("passage", "A way through or along something"),
    WordBuilderEntry("pattern", "A repeated decorative design"),
    WordBuilderEntry("penguin", "A flightless seabird of the Southern Hemisphere"),
    WordBuilderEntry("pyramid", "A structure with triangular sides meeting at a point"),
    WordBuilderEntry("rainbow", "An arc of colours in the sky"),
    WordBuilderEntry("shelter", "A place giving protection from weather"),
    WordBuilderEntry("silence", "Complete absence of sound"),
    WordBuilderEntry("surplus", "An amount beyond what is needed"),
    WordBuilderEntry("thunder", "The loud sound following lightning"),
    WordBuilderEntry("triumph", "A great victory or achievement"),
    WordBuilderEntry("uniform", "A set of standardised clothing"),
    WordBuilderEntry("veteran", "A person with long experience"),
    WordBuilderEntry("volcano", "A mountain that erupts lava"),
    WordBuilderEntry("warrior", "A brave or experienced fighter"),
)

_BY_DIFFICULTY = {
    Difficulty.EASY: EASY_WORDS,
    Difficulty.MEDIUM: MEDIUM_WORDS,
    Difficulty.HARD: HARD_WORDS,
}


def words_for(difficulty: Difficulty) -> tuple[WordBuilderEntry, ...]:
    return _BY_DIFFICULTY[Difficulty(difficulty)]

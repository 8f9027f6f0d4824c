"""
District adjacency data for Nepal.

The table lists the 75 districts of the pre-2015 administrative map. Split
units (Nawalparasi, Rukum) keep their old single name; the alias table maps
the new halves back onto them.

Neighbour order is significant: breadth-first search expands neighbours in
list order, so the first entry wins ties between equally short routes.
"""

from types import MappingProxyType
from typing import Dict, List


# The adjacency table as pure data
# Using MappingProxyType for immutability
_ADJACENCY_DATA = {
    # Koshi / Mechi
    "taplejung": ["panchthar", "terhathum", "sankhuwasabha"],
    "panchthar": ["taplejung", "ilam", "terhathum", "dhankuta"],
    "ilam": ["panchthar", "jhapa", "morang", "dhankuta"],
    "jhapa": ["ilam", "morang"],
    "morang": ["jhapa", "ilam", "dhankuta", "sunsari"],
    "sunsari": ["morang", "dhankuta", "udayapur", "saptari"],
    "dhankuta": ["terhathum", "panchthar", "ilam", "morang", "sunsari", "bhojpur", "sankhuwasabha"],
    "terhathum": ["taplejung", "panchthar", "dhankuta", "sankhuwasabha"],
    "sankhuwasabha": ["taplejung", "terhathum", "dhankuta", "bhojpur", "solukhumbu"],
    "bhojpur": ["sankhuwasabha", "dhankuta", "udayapur", "khotang", "solukhumbu"],
    # Sagarmatha / Janakpur
    "solukhumbu": ["sankhuwasabha", "bhojpur", "khotang", "okhaldhunga", "ramechhap", "dolakha"],
    "khotang": ["solukhumbu", "bhojpur", "udayapur", "okhaldhunga"],
    "okhaldhunga": ["solukhumbu", "khotang", "udayapur", "sindhuli", "ramechhap"],
    "udayapur": ["khotang", "bhojpur", "sunsari", "saptari", "siraha", "sindhuli", "okhaldhunga"],
    "saptari": ["sunsari", "udayapur", "siraha"],
    "siraha": ["saptari", "udayapur", "dhanusha"],
    "dhanusha": ["siraha", "mahottari", "sindhuli"],
    "mahottari": ["dhanusha", "sarlahi", "sindhuli"],
    "sarlahi": ["mahottari", "rautahat", "sindhuli"],
    "sindhuli": ["udayapur", "okhaldhunga", "ramechhap", "kavrepalanchok", "makwanpur", "sarlahi", "mahottari", "dhanusha"],
    # Narayani
    "rautahat": ["sarlahi", "bara", "makwanpur"],
    "bara": ["rautahat", "parsa", "makwanpur"],
    "parsa": ["bara", "makwanpur", "chitwan"],
    "makwanpur": ["kathmandu", "lalitpur", "kavrepalanchok", "sindhuli", "rautahat", "bara", "parsa", "chitwan", "dhading"],
    "chitwan": ["makwanpur", "parsa", "dhading", "gorkha", "tanahu", "nawalparasi"],
    # Bagmati / Janakpur hills
    "dolakha": ["solukhumbu", "ramechhap", "sindhupalchok"],
    "ramechhap": ["dolakha", "solukhumbu", "okhaldhunga", "sindhuli", "kavrepalanchok", "sindhupalchok"],
    "sindhupalchok": ["dolakha", "ramechhap", "kavrepalanchok", "kathmandu", "nuwakot", "rasuwa"],
    "kavrepalanchok": ["sindhupalchok", "ramechhap", "sindhuli", "makwanpur", "lalitpur", "bhaktapur", "kathmandu"],
    "kathmandu": ["lalitpur", "bhaktapur", "kavrepalanchok", "sindhupalchok", "nuwakot", "dhading", "makwanpur"],
    "lalitpur": ["kathmandu", "bhaktapur", "kavrepalanchok", "makwanpur"],
    "bhaktapur": ["kathmandu", "lalitpur", "kavrepalanchok"],
    "nuwakot": ["kathmandu", "sindhupalchok", "rasuwa", "dhading"],
    "rasuwa": ["nuwakot", "sindhupalchok", "dhading"],
    "dhading": ["rasuwa", "nuwakot", "kathmandu", "makwanpur", "chitwan", "gorkha"],
    # Gandaki
    "gorkha": ["dhading", "chitwan", "tanahu", "lamjung", "manang"],
    "lamjung": ["gorkha", "manang", "kaski", "tanahu"],
    "manang": ["gorkha", "lamjung", "kaski", "mustang"],
    "tanahu": ["gorkha", "lamjung", "kaski", "syangja", "palpa", "nawalparasi", "chitwan"],
    "kaski": ["lamjung", "manang", "myagdi", "parbat", "syangja", "tanahu"],
    "syangja": ["kaski", "parbat", "gulmi", "palpa", "tanahu"],
    # Dhaulagiri
    "parbat": ["kaski", "myagdi", "baglung", "gulmi", "syangja"],
    "myagdi": ["mustang", "kaski", "parbat", "baglung", "dolpa"],
    "mustang": ["manang", "myagdi", "dolpa"],
    "baglung": ["myagdi", "parbat", "gulmi", "pyuthan", "rolpa", "rukum"],
    # Lumbini
    "gulmi": ["baglung", "parbat", "syangja", "palpa", "arghakhanchi", "pyuthan"],
    "palpa": ["tanahu", "syangja", "gulmi", "arghakhanchi", "rupandehi", "nawalparasi"],
    "nawalparasi": ["chitwan", "tanahu", "palpa", "rupandehi"],
    "rupandehi": ["nawalparasi", "palpa", "kapilvastu"],
    "kapilvastu": ["rupandehi", "arghakhanchi", "dang"],
    "arghakhanchi": ["gulmi", "palpa", "kapilvastu", "dang", "pyuthan"],
    # Rapti
    "pyuthan": ["gulmi", "baglung", "rolpa", "dang", "arghakhanchi"],
    "rolpa": ["pyuthan", "baglung", "rukum", "salyan", "dang"],
    "rukum": ["rolpa", "baglung", "dolpa", "jajarkot", "salyan"],
    "dang": ["kapilvastu", "arghakhanchi", "pyuthan", "rolpa", "salyan", "banke"],
    "salyan": ["rolpa", "rukum", "jajarkot", "surkhet", "banke", "dang"],
    # Bheri
    "banke": ["dang", "salyan", "surkhet", "bardiya"],
    "bardiya": ["banke", "surkhet", "kailali"],
    "surkhet": ["banke", "bardiya", "salyan", "jajarkot", "dailekh", "achham", "kailali"],
    "jajarkot": ["rukum", "salyan", "surkhet", "dailekh", "kalikot", "dolpa"],
    "dailekh": ["surkhet", "jajarkot", "kalikot", "achham"],
    # Karnali
    "kalikot": ["dailekh", "jajarkot", "jumla", "mugu", "bajura", "achham"],
    "jumla": ["kalikot", "mugu", "dolpa"],
    "dolpa": ["mustang", "myagdi", "rukum", "jajarkot", "jumla", "mugu"],
    "mugu": ["dolpa", "jumla", "kalikot", "bajura", "humla"],
    "humla": ["mugu", "bajura"],
    # Seti / Mahakali
    "bajura": ["humla", "mugu", "kalikot", "achham", "bajhang"],
    "bajhang": ["bajura", "achham", "doti", "baitadi", "darchula"],
    "achham": ["bajura", "bajhang", "doti", "kailali", "surkhet", "dailekh", "kalikot"],
    "doti": ["achham", "bajhang", "baitadi", "dadeldhura", "kailali"],
    "kailali": ["doti", "achham", "surkhet", "bardiya", "kanchanpur", "dadeldhura"],
    "kanchanpur": ["kailali", "dadeldhura"],
    "dadeldhura": ["kanchanpur", "kailali", "doti", "baitadi"],
    "baitadi": ["dadeldhura", "doti", "bajhang", "darchula"],
    "darchula": ["baitadi", "bajhang"],
}


# Historical, alternate and colloquial names. Keys are compact (letters
# only); headquarter towns shared by several districts (e.g. Khalanga,
# Chainpur) are deliberately absent.
_ALIAS_DATA = {
    "ktm": "kathmandu",
    "patan": "lalitpur",
    "bhadgaon": "bhaktapur",
    "chitawan": "chitwan",
    "pokhara": "kaski",
    "butwal": "rupandehi",
    "bhairahawa": "rupandehi",
    "biratnagar": "morang",
    "inaruwa": "sunsari",
    "phidim": "panchthar",
    "tamghas": "gulmi",
    "tansen": "palpa",
    "beni": "myagdi",
    "lomanthang": "mustang",
    "dunai": "dolpa",
    "gamgadhi": "mugu",
    "simikot": "humla",
    "martadi": "bajura",
    "silgadhi": "doti",
    "mangalsen": "achham",
    "dasharathchand": "baitadi",
    "dhangadhi": "kailali",
    "mahendranagar": "kanchanpur",
    "gulariya": "bardiya",
    "nepalgunj": "banke",
    "ghorahi": "dang",
    "liwang": "rolpa",
    "birendranagar": "surkhet",
    "manma": "kalikot",
    "kavre": "kavrepalanchok",
    "kabhrepalanchok": "kavrepalanchok",
    "kabhre": "kavrepalanchok",
    "tanahun": "tanahu",
    "sindhupalchowk": "sindhupalchok",
    "dhanusa": "dhanusha",
    "makawanpur": "makwanpur",
    "tehrathum": "terhathum",
    "kapilbastu": "kapilvastu",
    "dangdeukhuri": "dang",
    "nawalpur": "nawalparasi",
    "nawalparasieast": "nawalparasi",
    "nawalparasiwest": "nawalparasi",
    "parasi": "nawalparasi",
    "rukumeast": "rukum",
    "rukumwest": "rukum",
}


# Expose immutable views of the tables
DISTRICT_ADJACENCY: Dict[str, List[str]] = MappingProxyType(_ADJACENCY_DATA)
DISTRICT_ALIASES: Dict[str, str] = MappingProxyType(_ALIAS_DATA)
DISPLAY_NAMES: Dict[str, str] = MappingProxyType(
    {key: key.capitalize() for key in _ADJACENCY_DATA}
)


def get_adjacency() -> Dict[str, List[str]]:
    """
    Get a copy of the adjacency table.

    Returns a mutable copy for callers that build variant graphs (tests,
    data curation tools).
    """
    return {node: list(neighbors) for node, neighbors in _ADJACENCY_DATA.items()}

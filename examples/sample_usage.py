import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from solid_thing.loading.loader import DatasetLoader
from solid_thing.thing.get import (
    get_boolean_all,
    get_boolean_one,
    get_datetime_one,
    get_decimal_one,
    get_integer_one,
    get_iri_all,
    get_literal_all,
    get_string_in_locale_one,
    get_string_unlocalized_one,
)
from solid_thing.thing.thing import get_thing_one

FOAF = "http://xmlns.com/foaf/0.1/"
VCARD = "http://www.w3.org/2006/vcard/ns#"
EX = "https://example.org/vocab#"

PROFILE = """
@prefix foaf: <http://xmlns.com/foaf/0.1/> .
@prefix vcard: <http://www.w3.org/2006/vcard/ns#> .
@prefix ex: <https://example.org/vocab#> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .

<https://alice.example/profile/card#me>
    foaf:name "Alice" ;
    vcard:note "Software developer"@en, "Softwareontwikkelaar"@nl ;
    foaf:knows <https://bob.example/profile/card#me>, <https://carol.example/profile/card#me> ;
    ex:age 42 ;
    ex:height 1.73 ;
    ex:memberSince "2019-04-01T09:30:00+02:00"^^xsd:dateTime ;
    ex:newsletter "maybe"^^xsd:boolean, true .
"""


def main():
    """Run sample reads"""

    print("=" * 80)
    print("Solid Thing Sample Usage")
    print("=" * 80)
    print()

    # 1. Load
    print("1. Loading profile dataset...")
    loader = DatasetLoader()
    dataset = loader.load_from_string(PROFILE, format="turtle", name="profile")
    alice = get_thing_one(dataset, "https://alice.example/profile/card#me")
    print(f"   ✓ {len(alice)} statements about {alice.subject}")
    print()

    # 2. Typed reads
    print("2. Reading typed values...")
    print(f"   Name:         {get_string_unlocalized_one(alice, FOAF + 'name')}")
    print(f"   Note (nl):    {get_string_in_locale_one(alice, VCARD + 'note', 'NL')}")
    print(f"   Age:          {get_integer_one(alice, EX + 'age')}")
    print(f"   Height:       {get_decimal_one(alice, EX + 'height')}")
    print(f"   Member since: {get_datetime_one(alice, EX + 'memberSince')}")
    print(f"   Knows:        {', '.join(get_iri_all(alice, FOAF + 'knows'))}")
    print()

    # 3. Malformed values
    print("3. Malformed values...")
    print(f"   Newsletter (first match): {get_boolean_one(alice, EX + 'newsletter')}")
    print(f"   Newsletter (all valid):   {get_boolean_all(alice, EX + 'newsletter')}")
    print()

    # 4. Raw literals
    print("4. Raw literals...")
    for literal in get_literal_all(alice, VCARD + "note"):
        print(f"   {literal.value!r} [{literal.language}]")
    print()

    print("=" * 80)


if __name__ == "__main__":
    main()

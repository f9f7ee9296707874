"""Read-only option catalogs for the profile form and the state-to-cities lookup.

Loaded once at import; components receive the ``Catalogs`` instance they need
instead of reaching for module globals.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

GENDER_OPTIONS: Tuple[Tuple[str, str], ...] = (
    ("male", "Male"),
    ("female", "Female"),
    ("non-binary", "Non-binary"),
    ("other", "Other"),
    ("prefer-not-to-say", "Prefer not to say"),
)

HOMELESS_OPTIONS: Tuple[Tuple[str, str], ...] = (
    ("yes", "Yes"),
    ("no", "No"),
)

RACE_OPTIONS: Tuple[Tuple[str, str], ...] = (
    ("american-indian", "American Indian or Alaska Native"),
    ("asian", "Asian"),
    ("black", "Black or African American"),
    ("hispanic", "Hispanic or Latino"),
    ("native-hawaiian", "Native Hawaiian or Other Pacific Islander"),
    ("white", "White"),
    ("other", "Other"),
    ("prefer-not-to-say", "Prefer not to say"),
)

INTEREST_OPTIONS: Tuple[str, ...] = (
    "Sports", "Music", "Reading", "Technology", "Art", "Travel", "Cooking", "Fitness",
    "Gaming", "Volunteering", "Photography", "Writing", "Dancing", "Gardening", "Crafts",
)

DISABILITY_OPTIONS: Tuple[str, ...] = (
    "Knee Injury", "Back Injury", "Shoulder Injury", "Hip Injury", "Ankle Injury",
    "Neck Injury", "Wrist Injury", "Elbow Injury", "Spinal Cord Injury", "Amputation",
    "Blindness", "Low Vision", "Deafness", "Hearing Loss", "Speech Impairment",
    "Cognitive Impairment", "Learning Disability", "ADHD", "Autism Spectrum Disorder",
    "Down Syndrome", "Cerebral Palsy", "Multiple Sclerosis", "Parkinson's Disease",
    "Arthritis", "Fibromyalgia", "Chronic Fatigue Syndrome",
    "Post-Traumatic Stress Disorder", "Depression", "Anxiety Disorder",
    "Bipolar Disorder", "Schizophrenia", "None",
)

MEDICAL_CONDITION_OPTIONS: Tuple[str, ...] = (
    "Diabetes", "Hypertension", "Asthma", "Heart Disease", "Arthritis", "Epilepsy",
    "Cancer", "HIV/AIDS", "Chronic Kidney Disease", "Mental Health Disorder",
    "Autoimmune Disease", "None",
)

# Major cities per state (lowercase full state name -> cities)
_STATE_CITIES = {
    "alabama": ("Birmingham", "Montgomery", "Mobile", "Huntsville", "Tuscaloosa", "Hoover", "Dothan"),
    "alaska": ("Anchorage", "Fairbanks", "Juneau", "Wasilla", "Sitka", "Ketchikan", "Kenai"),
    "arizona": ("Phoenix", "Tucson", "Mesa", "Chandler", "Scottsdale", "Glendale", "Gilbert"),
    "arkansas": ("Little Rock", "Fort Smith", "Fayetteville", "Springdale", "Jonesboro", "North Little Rock", "Conway"),
    "california": ("Los Angeles", "San Francisco", "San Diego", "Sacramento", "Oakland", "Fresno", "Long Beach", "San Jose"),
    "colorado": ("Denver", "Colorado Springs", "Aurora", "Fort Collins", "Lakewood", "Thornton", "Arvada"),
    "connecticut": ("Bridgeport", "New Haven", "Hartford", "Stamford", "Waterbury", "Norwalk", "Danbury"),
    "delaware": ("Wilmington", "Dover", "Newark", "Middletown", "Smyrna", "Milford", "Seaford"),
    "florida": ("Miami", "Tampa", "Orlando", "Jacksonville", "Tallahassee", "Fort Lauderdale", "St. Petersburg"),
    "georgia": ("Atlanta", "Augusta", "Columbus", "Savannah", "Athens", "Sandy Springs", "Roswell"),
    "hawaii": ("Honolulu", "Pearl City", "Hilo", "Kailua", "Kaneohe", "Waipahu", "Kahului"),
    "idaho": ("Boise", "Nampa", "Meridian", "Idaho Falls", "Pocatello", "Caldwell", "Coeur d'Alene"),
    "illinois": ("Chicago", "Aurora", "Rockford", "Joliet", "Naperville", "Springfield", "Peoria"),
    "indiana": ("Indianapolis", "Fort Wayne", "Evansville", "South Bend", "Carmel", "Fishers", "Bloomington"),
    "iowa": ("Des Moines", "Cedar Rapids", "Davenport", "Sioux City", "Iowa City", "Waterloo", "Council Bluffs"),
    "kansas": ("Wichita", "Overland Park", "Kansas City", "Olathe", "Topeka", "Lawrence", "Shawnee"),
    "kentucky": ("Louisville", "Lexington", "Bowling Green", "Owensboro", "Covington", "Hopkinsville", "Richmond"),
    "louisiana": ("New Orleans", "Baton Rouge", "Shreveport", "Lafayette", "Lake Charles", "Kenner", "Bossier City"),
    "maine": ("Portland", "Lewiston", "Bangor", "South Portland", "Auburn", "Biddeford", "Sanford"),
    "maryland": ("Baltimore", "Frederick", "Rockville", "Gaithersburg", "Bowie", "Annapolis", "College Park"),
    "massachusetts": ("Boston", "Worcester", "Springfield", "Lowell", "Cambridge", "New Bedford", "Brockton"),
    "michigan": ("Detroit", "Grand Rapids", "Warren", "Sterling Heights", "Lansing", "Ann Arbor", "Flint"),
    "minnesota": ("Minneapolis", "St. Paul", "Rochester", "Duluth", "Bloomington", "Brooklyn Park", "Plymouth"),
    "mississippi": ("Jackson", "Gulfport", "Southaven", "Hattiesburg", "Biloxi", "Meridian", "Tupelo"),
    "missouri": ("Kansas City", "St. Louis", "Springfield", "Columbia", "Independence", "Lee's Summit", "O'Fallon"),
    "montana": ("Billings", "Missoula", "Great Falls", "Bozeman", "Butte", "Helena", "Kalispell"),
    "nebraska": ("Omaha", "Lincoln", "Bellevue", "Grand Island", "Kearney", "Fremont", "Hastings"),
    "nevada": ("Las Vegas", "Henderson", "Reno", "North Las Vegas", "Sparks", "Carson City", "Fernley"),
    "new hampshire": ("Manchester", "Nashua", "Concord", "Derry", "Rochester", "Dover", "Keene"),
    "new jersey": ("Newark", "Jersey City", "Paterson", "Elizabeth", "Edison", "Woodbridge", "Lakewood"),
    "new mexico": ("Albuquerque", "Las Cruces", "Rio Rancho", "Santa Fe", "Roswell", "Farmington", "Clovis"),
    "new york": ("New York", "Buffalo", "Rochester", "Albany", "Syracuse", "Yonkers", "Utica"),
    "north carolina": ("Charlotte", "Raleigh", "Greensboro", "Durham", "Winston-Salem", "Fayetteville", "Cary"),
    "north dakota": ("Fargo", "Bismarck", "Grand Forks", "Minot", "West Fargo", "Williston", "Dickinson"),
    "ohio": ("Columbus", "Cleveland", "Cincinnati", "Toledo", "Akron", "Dayton", "Parma"),
    "oklahoma": ("Oklahoma City", "Tulsa", "Norman", "Broken Arrow", "Lawton", "Edmond", "Moore"),
    "oregon": ("Portland", "Eugene", "Salem", "Gresham", "Hillsboro", "Bend", "Beaverton"),
    "pennsylvania": ("Philadelphia", "Pittsburgh", "Allentown", "Erie", "Reading", "Scranton", "Bethlehem"),
    "rhode island": ("Providence", "Warwick", "Cranston", "Pawtucket", "East Providence", "Woonsocket", "Newport"),
    "south carolina": ("Charleston", "Columbia", "North Charleston", "Mount Pleasant", "Rock Hill", "Greenville", "Summerville"),
    "south dakota": ("Sioux Falls", "Rapid City", "Aberdeen", "Brookings", "Watertown", "Mitchell", "Yankton"),
    "tennessee": ("Nashville", "Memphis", "Knoxville", "Chattanooga", "Murfreesboro", "Franklin", "Jackson"),
    "texas": ("Houston", "Dallas", "Austin", "San Antonio", "Fort Worth", "El Paso", "Arlington"),
    "utah": ("Salt Lake City", "West Valley City", "Provo", "West Jordan", "Orem", "Sandy", "Ogden"),
    "vermont": ("Burlington", "Essex", "South Burlington", "Colchester", "Rutland", "Montpelier", "Barre"),
    "virginia": ("Virginia Beach", "Norfolk", "Richmond", "Chesapeake", "Newport News", "Alexandria", "Hampton"),
    "washington": ("Seattle", "Spokane", "Tacoma", "Vancouver", "Bellevue", "Everett", "Kent"),
    "west virginia": ("Charleston", "Huntington", "Parkersburg", "Morgantown", "Wheeling", "Martinsburg", "Fairmont"),
    "wisconsin": ("Milwaukee", "Madison", "Green Bay", "Kenosha", "Racine", "Appleton", "Waukesha"),
    "wyoming": ("Cheyenne", "Casper", "Laramie", "Gillette", "Rock Springs", "Sheridan", "Green River"),
}

_STATE_ABBREVIATIONS = {
    "al": "alabama", "ak": "alaska", "az": "arizona", "ar": "arkansas", "ca": "california",
    "co": "colorado", "ct": "connecticut", "de": "delaware", "fl": "florida", "ga": "georgia",
    "hi": "hawaii", "id": "idaho", "il": "illinois", "in": "indiana", "ia": "iowa",
    "ks": "kansas", "ky": "kentucky", "la": "louisiana", "me": "maine", "md": "maryland",
    "ma": "massachusetts", "mi": "michigan", "mn": "minnesota", "ms": "mississippi", "mo": "missouri",
    "mt": "montana", "ne": "nebraska", "nv": "nevada", "nh": "new hampshire", "nj": "new jersey",
    "nm": "new mexico", "ny": "new york", "nc": "north carolina", "nd": "north dakota", "oh": "ohio",
    "ok": "oklahoma", "or": "oregon", "pa": "pennsylvania", "ri": "rhode island", "sc": "south carolina",
    "sd": "south dakota", "tn": "tennessee", "tx": "texas", "ut": "utah", "vt": "vermont",
    "va": "virginia", "wa": "washington", "wv": "west virginia", "wi": "wisconsin", "wy": "wyoming",
}


@dataclass(frozen=True)
class Catalogs:
    """Immutable lookup data shared by the form, prompts and fallbacks."""

    genders: Tuple[Tuple[str, str], ...] = GENDER_OPTIONS
    homeless: Tuple[Tuple[str, str], ...] = HOMELESS_OPTIONS
    races: Tuple[Tuple[str, str], ...] = RACE_OPTIONS
    interests: Tuple[str, ...] = INTEREST_OPTIONS
    disabilities: Tuple[str, ...] = DISABILITY_OPTIONS
    medical_conditions: Tuple[str, ...] = MEDICAL_CONDITION_OPTIONS
    state_cities: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType(dict(_STATE_CITIES))
    )
    state_abbreviations: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(_STATE_ABBREVIATIONS))
    )

    def resolve_state(self, state: str) -> Optional[str]:
        """Return the lowercase full state name for a name or two-letter code."""
        key = (state or "").strip().lower()
        if not key:
            return None
        if key in self.state_cities:
            return key
        return self.state_abbreviations.get(key)

    def nearby_cities(self, state: str) -> Tuple[str, ...]:
        """Major cities in the given state; empty when the state is unknown."""
        resolved = self.resolve_state(state)
        if resolved is None:
            return ()
        return self.state_cities.get(resolved, ())


CATALOGS = Catalogs()

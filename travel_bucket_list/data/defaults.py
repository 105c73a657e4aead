"""
Seed trip catalogue.

Loaded when no trip list has been persisted yet (or the stored list is
empty), so a first run shows a populated bucket list instead of a blank
timeline.
"""

from typing import Any

from travel_bucket_list.data.models import Trip

SEED_TRIPS: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Tuscany Wedding Recce",
        "destination": "Tuscany, Italy",
        "lat": 43.35,
        "lng": 11.35,
        "status": "Planning",
        "category": "Food & Wine",
        "costEstimate": 1200,
        "currency": "£",
        "bestMonths": [3, 4, 9, 10],
        "nights": 4,
        "notes": "Scout La Conca area, try local vineyards for wedding wine",
        "priority": 5,
        "people": "Joe & Sophie",
    },
    {
        "id": 2,
        "name": "Iceland Ring Road",
        "destination": "Iceland",
        "lat": 64.96,
        "lng": -19.02,
        "status": "Dream",
        "category": "Adventure",
        "costEstimate": 4500,
        "currency": "£",
        "bestMonths": [5, 6, 7, 8],
        "nights": 10,
        "notes": (
            "Northern lights best Sep-Mar, but midnight sun in summer. Full "
            "ring road needs 10+ days."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 3,
        "name": "Japanese Alps & Tokyo",
        "destination": "Japan",
        "lat": 36.20,
        "lng": 137.25,
        "status": "Dream",
        "category": "Cultural",
        "costEstimate": 6000,
        "currency": "£",
        "bestMonths": [2, 3, 4, 10, 11],
        "nights": 14,
        "notes": (
            "Cherry blossom late March/early April. Mix Tokyo, Kyoto, Takayama, "
            "Hakone."
        ),
        "priority": 5,
        "people": "Joe & Sophie",
    },
    {
        "id": 4,
        "name": "Amalfi Coast Long Weekend",
        "destination": "Amalfi, Italy",
        "lat": 40.63,
        "lng": 14.60,
        "status": "Dream",
        "category": "Beach & Relaxation",
        "costEstimate": 2000,
        "currency": "£",
        "bestMonths": [4, 5, 6, 9, 10],
        "nights": 4,
        "notes": "Positano, Ravello, lemon groves. Good combo with Tuscany trip.",
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 5,
        "name": "Patagonia Trek",
        "destination": "Patagonia, Argentina",
        "lat": -50.94,
        "lng": -73.10,
        "status": "Dream",
        "category": "Adventure",
        "costEstimate": 5500,
        "currency": "£",
        "bestMonths": [10, 11, 12, 1, 2, 3],
        "nights": 12,
        "notes": "Torres del Paine W Trek. Southern hemisphere summer = Nov-Mar.",
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 6,
        "name": "Dolomites Hut-to-Hut Trek",
        "destination": "Dolomites, Italy",
        "lat": 46.41,
        "lng": 11.84,
        "status": "Dream",
        "category": "Adventure",
        "costEstimate": 2500,
        "currency": "£",
        "bestMonths": [6, 7, 8, 9],
        "nights": 7,
        "notes": (
            "Multi-day rifugio trek. Alta Via 1 or 2. Incredible food at each "
            "mountain hut. Pairs well with a Tuscany trip."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 7,
        "name": "Vietnam North to South",
        "destination": "Vietnam",
        "lat": 16.05,
        "lng": 108.22,
        "status": "Dream",
        "category": "Cultural",
        "costEstimate": 3000,
        "currency": "£",
        "bestMonths": [10, 11, 12],
        "nights": 14,
        "notes": (
            "Hanoi → Ha Long Bay → Hoi An → Ho Chi Minh. Street food capital of "
            "the world. Incredibly cheap once there."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 8,
        "name": "New Zealand South Island Road Trip",
        "destination": "New Zealand",
        "lat": -44.50,
        "lng": 168.70,
        "status": "Dream",
        "category": "Road Trip",
        "costEstimate": 6500,
        "currency": "£",
        "bestMonths": [11, 12, 1, 2, 3],
        "nights": 16,
        "notes": (
            "Milford Track (bucket list walk), Queenstown, Wanaka, Fox Glacier, "
            "Abel Tasman. Campervan recommended."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 9,
        "name": "Douro Valley & Lisbon",
        "destination": "Portugal",
        "lat": 41.16,
        "lng": -7.79,
        "status": "Dream",
        "category": "Food & Wine",
        "costEstimate": 1200,
        "currency": "£",
        "bestMonths": [4, 5, 6, 9, 10],
        "nights": 5,
        "notes": (
            "Port wine region + Lisbon city break. Easy long weekend from "
            "London. Pastéis de nata pilgrimage."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 10,
        "name": "Croatian Coast by Boat",
        "destination": "Croatia",
        "lat": 43.51,
        "lng": 16.44,
        "status": "Dream",
        "category": "Beach & Relaxation",
        "costEstimate": 2000,
        "currency": "£",
        "bestMonths": [5, 6, 9],
        "nights": 7,
        "notes": (
            "Dubrovnik → Hvar → Split sailing route. Avoid July/August crowds. "
            "Stunning islands, affordable seafood."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 11,
        "name": "Morocco: Atlas Mountains & Marrakech",
        "destination": "Morocco",
        "lat": 31.63,
        "lng": -8.00,
        "status": "Dream",
        "category": "Adventure",
        "costEstimate": 1500,
        "currency": "£",
        "bestMonths": [3, 4, 5, 10, 11],
        "nights": 6,
        "notes": (
            "Toubkal trek or Berber village walks + Marrakech souks. Short "
            "flight from London, incredible value."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 12,
        "name": "Maldives",
        "destination": "Maldives",
        "lat": 3.20,
        "lng": 73.22,
        "status": "Dream",
        "category": "Beach & Relaxation",
        "costEstimate": 5000,
        "currency": "£",
        "bestMonths": [1, 2, 3, 4],
        "nights": 8,
        "notes": (
            "Overwater villa, snorkelling, total switch-off. Dry season "
            "Jan-Apr. Book well in advance for best rates."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 13,
        "name": "Sri Lanka",
        "destination": "Sri Lanka",
        "lat": 7.87,
        "lng": 80.77,
        "status": "Dream",
        "category": "Cultural",
        "costEstimate": 3500,
        "currency": "£",
        "bestMonths": [12, 1, 2, 3],
        "nights": 12,
        "notes": (
            "Incredible variety: temples, tea country, safari, beaches. "
            "Sigiriya, Ella train, Yala NP, south coast. Much better value than "
            "Maldives."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 14,
        "name": "Norwegian Fjords",
        "destination": "Norway",
        "lat": 61.40,
        "lng": 6.75,
        "status": "Dream",
        "category": "Adventure",
        "costEstimate": 3000,
        "currency": "£",
        "bestMonths": [6, 7, 8],
        "nights": 7,
        "notes": (
            "Geirangerfjord, Trolltunga hike, kayaking. Summer for midnight sun "
            "hiking, winter for northern lights."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 15,
        "name": "South Africa: Cape & Safari",
        "destination": "South Africa",
        "lat": -33.92,
        "lng": 18.42,
        "status": "Dream",
        "category": "Safari & Wildlife",
        "costEstimate": 5500,
        "currency": "£",
        "bestMonths": [10, 11, 12, 1, 2, 3],
        "nights": 12,
        "notes": (
            "Cape Town wine region (Stellenbosch/Franschhoek) + Garden Route + "
            "Kruger/private game reserve. Big Five + world-class food."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 16,
        "name": "New York City",
        "destination": "New York, USA",
        "lat": 40.71,
        "lng": -74.01,
        "status": "Dream",
        "category": "City Break",
        "costEstimate": 3000,
        "currency": "£",
        "bestMonths": [4, 5, 9, 10],
        "nights": 5,
        "notes": (
            "Brooklyn food scene, Central Park, High Line, Broadway. Autumn is "
            "magical — crisp air, fall colours. Spring equally good."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 17,
        "name": "Copenhagen & Malmö",
        "destination": "Denmark / Sweden",
        "lat": 55.68,
        "lng": 12.57,
        "status": "Dream",
        "category": "City Break",
        "costEstimate": 1800,
        "currency": "£",
        "bestMonths": [5, 6, 7, 8, 9],
        "nights": 4,
        "notes": (
            "Noma-adjacent food scene, Tivoli, design culture. Train across the "
            "Øresund Bridge to Malmö for a two-country trip. Hygge central."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 18,
        "name": "Buenos Aires",
        "destination": "Argentina",
        "lat": -34.60,
        "lng": -58.38,
        "status": "Dream",
        "category": "City Break",
        "costEstimate": 2500,
        "currency": "£",
        "bestMonths": [3, 4, 5, 10, 11],
        "nights": 6,
        "notes": (
            "Steak, Malbec, tango, incredible architecture. Combine with "
            "Patagonia for a mega trip. Very affordable on the ground."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 19,
        "name": "Istanbul",
        "destination": "Turkey",
        "lat": 41.01,
        "lng": 28.98,
        "status": "Dream",
        "category": "City Break",
        "costEstimate": 1200,
        "currency": "£",
        "bestMonths": [4, 5, 9, 10],
        "nights": 4,
        "notes": (
            "Hagia Sophia, Grand Bazaar, Bosphorus ferry, kebab culture. "
            "Straddling two continents. Amazing value for money."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 20,
        "name": "Chamonix Ski & Snowboard",
        "destination": "Chamonix, France",
        "lat": 45.92,
        "lng": 6.87,
        "status": "Dream",
        "category": "Ski & Snow",
        "costEstimate": 2200,
        "currency": "£",
        "bestMonths": [1, 2, 3],
        "nights": 5,
        "notes": (
            "Mont Blanc views, Vallée Blanche descent, great après-ski. "
            "Advanced terrain. Easyjet from Gatwick."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 21,
        "name": "Niseko Powder Trip",
        "destination": "Hokkaido, Japan",
        "lat": 42.86,
        "lng": 140.70,
        "status": "Dream",
        "category": "Ski & Snow",
        "costEstimate": 5000,
        "currency": "£",
        "bestMonths": [1, 2],
        "nights": 8,
        "notes": (
            "Best powder snow on earth. Combine with Tokyo for a few days "
            "either side. Japanese onsen after skiing = perfection. Could pair "
            "with the wider Japan trip."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 22,
        "name": "Lofoten Islands Winter",
        "destination": "Lofoten, Norway",
        "lat": 68.15,
        "lng": 14.40,
        "status": "Dream",
        "category": "Ski & Snow",
        "costEstimate": 2800,
        "currency": "£",
        "bestMonths": [1, 2, 3],
        "nights": 6,
        "notes": (
            "Northern lights + ski touring + Arctic surfing + fishing villages. "
            "Unlike any ski trip you'll ever do. Remote and stunning."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 23,
        "name": "Bali: Ubud & Coast",
        "destination": "Bali, Indonesia",
        "lat": -8.51,
        "lng": 115.26,
        "status": "Dream",
        "category": "Wellness",
        "costEstimate": 3000,
        "currency": "£",
        "bestMonths": [4, 5, 6, 7, 8, 9, 10],
        "nights": 10,
        "notes": (
            "Ubud rice terraces + yoga retreats + Seminyak/Canggu coast. "
            "Incredible spa culture, affordable luxury. Monkey Forest."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 24,
        "name": "Swiss Alps Wellness Retreat",
        "destination": "Switzerland",
        "lat": 46.59,
        "lng": 7.91,
        "status": "Dream",
        "category": "Wellness",
        "costEstimate": 3500,
        "currency": "£",
        "bestMonths": [6, 7, 8, 9],
        "nights": 5,
        "notes": (
            "Mountain spa hotels in Grindelwald or Lauterbrunnen. Hiking by "
            "day, thermal baths by evening. Clean air reset. Expensive but "
            "worth it."
        ),
        "priority": 2,
        "people": "Joe & Sophie",
    },
    {
        "id": 25,
        "name": "Scottish Highlands NC500",
        "destination": "Scotland, UK",
        "lat": 57.59,
        "lng": -5.05,
        "status": "Dream",
        "category": "Road Trip",
        "costEstimate": 1500,
        "currency": "£",
        "bestMonths": [5, 6, 7, 8, 9],
        "nights": 7,
        "notes": (
            "North Coast 500 route. Wild beaches, whisky distilleries, castles, "
            "dolphins. No flights needed — drive up from London or train to "
            "Inverness."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 26,
        "name": "Route 66 USA",
        "destination": "USA",
        "lat": 35.22,
        "lng": -101.83,
        "status": "Dream",
        "category": "Road Trip",
        "costEstimate": 5000,
        "currency": "£",
        "bestMonths": [4, 5, 9, 10],
        "nights": 14,
        "notes": (
            "Chicago to LA. Classic American road trip — diners, desert, "
            "motels, Grand Canyon detour. Once in a lifetime."
        ),
        "priority": 2,
        "people": "Joe & Sophie",
    },
    {
        "id": 27,
        "name": "Wild Atlantic Way, Ireland",
        "destination": "Ireland",
        "lat": 52.97,
        "lng": -9.43,
        "status": "Dream",
        "category": "Road Trip",
        "costEstimate": 1200,
        "currency": "£",
        "bestMonths": [5, 6, 7, 8, 9],
        "nights": 6,
        "notes": (
            "2,500km coastal route. Cliffs of Moher, Dingle Peninsula, seafood "
            "pubs, Galway. Easy and affordable from London."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 28,
        "name": "San Sebastián & Rioja",
        "destination": "Basque Country, Spain",
        "lat": 43.32,
        "lng": -1.98,
        "status": "Dream",
        "category": "Food & Wine",
        "costEstimate": 1800,
        "currency": "£",
        "bestMonths": [5, 6, 9, 10],
        "nights": 5,
        "notes": (
            "Highest concentration of Michelin stars per capita. Pintxos crawl "
            "in old town + Rioja wine region day trip. Absolute food mecca."
        ),
        "priority": 5,
        "people": "Joe & Sophie",
    },
    {
        "id": 29,
        "name": "Bordeaux Wine Trail",
        "destination": "Bordeaux, France",
        "lat": 44.84,
        "lng": -0.58,
        "status": "Dream",
        "category": "Food & Wine",
        "costEstimate": 1500,
        "currency": "£",
        "bestMonths": [5, 6, 9, 10],
        "nights": 4,
        "notes": (
            "Saint-Émilion, Médoc, Pauillac. Eurostar + TGV from London. La "
            "Cité du Vin museum. Cycle between châteaux."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 30,
        "name": "Tanzania: Serengeti & Zanzibar",
        "destination": "Tanzania",
        "lat": -2.33,
        "lng": 34.83,
        "status": "Dream",
        "category": "Safari & Wildlife",
        "costEstimate": 6500,
        "currency": "£",
        "bestMonths": [1, 2, 6, 7, 8, 9, 10],
        "nights": 12,
        "notes": (
            "Great Migration (Jun-Oct Serengeti, Jan-Feb calving season). Add "
            "Zanzibar beach for 3-4 days at the end. Top-tier safari."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 31,
        "name": "Galápagos Islands",
        "destination": "Ecuador",
        "lat": -0.95,
        "lng": -90.97,
        "status": "Dream",
        "category": "Safari & Wildlife",
        "costEstimate": 7000,
        "currency": "£",
        "bestMonths": [1, 2, 3, 4, 5, 6],
        "nights": 10,
        "notes": (
            "Truly once-in-a-lifetime wildlife. Giant tortoises, blue-footed "
            "boobies, marine iguanas, snorkelling with sea lions. Small ship "
            "cruise or island-hopping."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 32,
        "name": "Everest Base Camp Trek",
        "destination": "Nepal",
        "lat": 27.99,
        "lng": 86.85,
        "status": "Dream",
        "category": "Adventure",
        "costEstimate": 3000,
        "currency": "£",
        "bestMonths": [3, 4, 5, 10, 11],
        "nights": 16,
        "notes": (
            "The classic high-altitude trek. 14 days trail + Kathmandu either "
            "side. Teahouse lodges the whole way. Your ultra fitness would make "
            "this very doable."
        ),
        "priority": 4,
        "people": "Joe",
    },
    {
        "id": 33,
        "name": "Jordan: Petra & Wadi Rum",
        "destination": "Jordan",
        "lat": 30.33,
        "lng": 35.44,
        "status": "Dream",
        "category": "Adventure",
        "costEstimate": 1800,
        "currency": "£",
        "bestMonths": [3, 4, 5, 10, 11],
        "nights": 6,
        "notes": (
            "Petra (full day minimum), Wadi Rum desert camp under the stars, "
            "Dead Sea float. Short flight, huge impact."
        ),
        "priority": 5,
        "people": "Joe & Sophie",
    },
    {
        "id": 34,
        "name": "Peru: Machu Picchu & Sacred Valley",
        "destination": "Peru",
        "lat": -13.16,
        "lng": -72.55,
        "status": "Dream",
        "category": "Cultural",
        "costEstimate": 4000,
        "currency": "£",
        "bestMonths": [4, 5, 6, 7, 8, 9, 10],
        "nights": 10,
        "notes": (
            "Inca Trail or Salkantay Trek to Machu Picchu. Lima food scene is "
            "world-class. Cusco altitude acclimatisation needed."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 35,
        "name": "Rajasthan, India",
        "destination": "India",
        "lat": 26.92,
        "lng": 75.79,
        "status": "Dream",
        "category": "Cultural",
        "costEstimate": 2500,
        "currency": "£",
        "bestMonths": [10, 11, 12, 1, 2, 3],
        "nights": 12,
        "notes": (
            "Jaipur, Udaipur, Jodhpur, Jaisalmer. Palace hotels, incredible "
            "food, Thar Desert camel trek. Sensory overload in the best way."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 36,
        "name": "Costa Rica",
        "destination": "Costa Rica",
        "lat": 10.42,
        "lng": -84.00,
        "status": "Dream",
        "category": "Adventure",
        "costEstimate": 3500,
        "currency": "£",
        "bestMonths": [12, 1, 2, 3, 4],
        "nights": 10,
        "notes": (
            "Arenal volcano, Monteverde cloud forest, Manuel Antonio beaches, "
            "zip-lining, sloths. Pura vida lifestyle. Great mix of adventure "
            "and chill."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 37,
        "name": "Antigua & Barbuda",
        "destination": "Antigua",
        "lat": 17.12,
        "lng": -61.85,
        "status": "Dream",
        "category": "Beach & Relaxation",
        "costEstimate": 3500,
        "currency": "£",
        "bestMonths": [12, 1, 2, 3, 4],
        "nights": 7,
        "notes": (
            "365 beaches — one for every day. Direct BA flights from Gatwick. "
            "Shirley Heights Sunday party, Nelson's Dockyard. Caribbean without "
            "the long-haul."
        ),
        "priority": 2,
        "people": "Joe & Sophie",
    },
    {
        "id": 38,
        "name": "South Korea: Seoul & Temples",
        "destination": "South Korea",
        "lat": 37.57,
        "lng": 126.98,
        "status": "Dream",
        "category": "Cultural",
        "costEstimate": 3000,
        "currency": "£",
        "bestMonths": [3, 4, 5, 9, 10, 11],
        "nights": 8,
        "notes": (
            "Seoul street food, DMZ tour, Gyeongju temples, Busan fish market. "
            "K-BBQ origin story. Autumn foliage is spectacular."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 39,
        "name": "Thailand: North & Islands",
        "destination": "Thailand",
        "lat": 18.79,
        "lng": 98.98,
        "status": "Dream",
        "category": "Cultural",
        "costEstimate": 2500,
        "currency": "£",
        "bestMonths": [11, 12, 1, 2, 3],
        "nights": 12,
        "notes": (
            "Chiang Mai temples & night markets → Koh Lanta or Koh Samui for "
            "beaches. Thai cooking classes. Outstanding value."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 40,
        "name": "Cambodia: Angkor & Coast",
        "destination": "Cambodia",
        "lat": 13.41,
        "lng": 103.87,
        "status": "Dream",
        "category": "Cultural",
        "costEstimate": 2000,
        "currency": "£",
        "bestMonths": [11, 12, 1, 2, 3],
        "nights": 8,
        "notes": (
            "Angkor Wat sunrise is a bucket list moment. Add Phnom Penh history "
            "+ Koh Rong beaches. Combines well with Vietnam."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 41,
        "name": "Canadian Rockies Road Trip",
        "destination": "Alberta, Canada",
        "lat": 51.42,
        "lng": -116.18,
        "status": "Dream",
        "category": "Road Trip",
        "costEstimate": 4000,
        "currency": "£",
        "bestMonths": [6, 7, 8, 9],
        "nights": 10,
        "notes": (
            "Banff, Lake Louise, Jasper, Icefields Parkway. One of the world's "
            "most scenic drives. Bear spotting, turquoise lakes, mountain "
            "hiking."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 42,
        "name": "Amalfi to Sicily Road Trip",
        "destination": "Sicily, Italy",
        "lat": 37.50,
        "lng": 14.26,
        "status": "Dream",
        "category": "Road Trip",
        "costEstimate": 2200,
        "currency": "£",
        "bestMonths": [5, 6, 9, 10],
        "nights": 8,
        "notes": (
            "Drive south through Calabria to Sicily. Mount Etna, Taormina, "
            "Palermo street food, Valley of Temples. Raw, authentic Italy."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 43,
        "name": "Budapest & Vienna",
        "destination": "Hungary / Austria",
        "lat": 47.50,
        "lng": 19.04,
        "status": "Dream",
        "category": "City Break",
        "costEstimate": 1400,
        "currency": "£",
        "bestMonths": [4, 5, 6, 9, 10, 12],
        "nights": 5,
        "notes": (
            "Budapest thermal baths, ruin bars, Danube views → train to Vienna "
            "for coffee houses, art, Sachertorte. Two gems, one trip. Christmas "
            "market season Dec."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 44,
        "name": "Greek Islands Hopping",
        "destination": "Greece",
        "lat": 36.42,
        "lng": 25.43,
        "status": "Dream",
        "category": "Beach & Relaxation",
        "costEstimate": 2200,
        "currency": "£",
        "bestMonths": [5, 6, 9, 10],
        "nights": 8,
        "notes": (
            "Santorini + Naxos + Milos. Skip Mykonos party scene for "
            "lesser-known islands with better food and fewer crowds. Ferry "
            "between islands."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 45,
        "name": "Edinburgh Festival",
        "destination": "Edinburgh, UK",
        "lat": 55.95,
        "lng": -3.19,
        "status": "Dream",
        "category": "City Break",
        "costEstimate": 800,
        "currency": "£",
        "bestMonths": [8],
        "nights": 3,
        "notes": (
            "August Fringe Festival — comedy, theatre, street performers. Book "
            "early, prices triple. Arthur's Seat hike, whisky bars. Train from "
            "London."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 46,
        "name": "Rwanda Gorilla Trek",
        "destination": "Rwanda",
        "lat": -1.46,
        "lng": 29.57,
        "status": "Dream",
        "category": "Safari & Wildlife",
        "costEstimate": 5000,
        "currency": "£",
        "bestMonths": [6, 7, 8, 9, 12, 1, 2],
        "nights": 6,
        "notes": (
            "Mountain gorilla trekking in Volcanoes NP. Permits £1,300pp but "
            "absolutely life-changing. Small country, easy to combine all "
            "highlights."
        ),
        "priority": 5,
        "people": "Joe & Sophie",
    },
    {
        "id": 47,
        "name": "Namibia Self-Drive",
        "destination": "Namibia",
        "lat": -24.75,
        "lng": 15.76,
        "status": "Dream",
        "category": "Safari & Wildlife",
        "costEstimate": 4500,
        "currency": "£",
        "bestMonths": [5, 6, 7, 8, 9, 10],
        "nights": 12,
        "notes": (
            "Sossusvlei dunes, Etosha NP, Skeleton Coast, Damaraland. Most "
            "photogenic country in Africa. Self-drive in a 4x4 with rooftop "
            "tent."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 48,
        "name": "Antarctica Expedition Cruise",
        "destination": "Antarctica",
        "lat": -64.24,
        "lng": -62.69,
        "status": "Dream",
        "category": "Adventure",
        "costEstimate": 12000,
        "currency": "£",
        "bestMonths": [11, 12, 1, 2, 3],
        "nights": 12,
        "notes": (
            "Drake Passage from Ushuaia. Penguins, icebergs, kayaking, polar "
            "plunge. The ultimate bucket list. Save this for a milestone "
            "birthday."
        ),
        "priority": 2,
        "people": "Joe & Sophie",
    },
    {
        "id": 49,
        "name": "Oman: Desert & Coast",
        "destination": "Oman",
        "lat": 23.59,
        "lng": 58.54,
        "status": "Dream",
        "category": "Adventure",
        "costEstimate": 2500,
        "currency": "£",
        "bestMonths": [10, 11, 12, 1, 2, 3],
        "nights": 7,
        "notes": (
            "Wahiba Sands desert camping, Jebel Akhdar mountains, Muscat, wadis "
            "for swimming. Arabian Peninsula without the Dubai bling. "
            "Incredibly safe."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 50,
        "name": "Colombia: Cartagena & Coffee Region",
        "destination": "Colombia",
        "lat": 4.71,
        "lng": -74.07,
        "status": "Dream",
        "category": "Cultural",
        "costEstimate": 3000,
        "currency": "£",
        "bestMonths": [12, 1, 2, 3, 7, 8],
        "nights": 10,
        "notes": (
            "Cartagena old city, Medellín transformation, Cocora Valley wax "
            "palms, coffee farm stays. Salsa, empanadas, rum. Hugely "
            "underrated."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 51,
        "name": "Lapland: Husky & Northern Lights",
        "destination": "Finnish Lapland",
        "lat": 67.92,
        "lng": 26.50,
        "status": "Dream",
        "category": "Ski & Snow",
        "costEstimate": 2500,
        "currency": "£",
        "bestMonths": [12, 1, 2, 3],
        "nights": 4,
        "notes": (
            "Husky sledding, reindeer safari, glass igloo, northern lights, "
            "snowmobiling. Magical winter escape. Short trip — great for a long "
            "weekend."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 52,
        "name": "Seville & Andalusia",
        "destination": "Spain",
        "lat": 37.39,
        "lng": -6.00,
        "status": "Dream",
        "category": "City Break",
        "costEstimate": 1000,
        "currency": "£",
        "bestMonths": [3, 4, 5, 10, 11],
        "nights": 4,
        "notes": (
            "Alcázar, flamenco, tapas culture, Ronda day trip. Spring is "
            "perfect — Semana Santa or Feria de Abril. Avoid summer heat."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 53,
        "name": "Borneo: Rainforest & Orangutans",
        "destination": "Malaysian Borneo",
        "lat": 5.42,
        "lng": 118.60,
        "status": "Dream",
        "category": "Safari & Wildlife",
        "costEstimate": 3500,
        "currency": "£",
        "bestMonths": [3, 4, 5, 6, 7, 8, 9, 10],
        "nights": 10,
        "notes": (
            "Sepilok orangutan rehab, Kinabatangan river wildlife cruises, "
            "Danum Valley pristine rainforest. Diving at Sipadan. Raw, wild, "
            "unforgettable."
        ),
        "priority": 3,
        "people": "Joe & Sophie",
    },
    {
        "id": 54,
        "name": "Mexico City & Oaxaca",
        "destination": "Mexico",
        "lat": 19.43,
        "lng": -99.13,
        "status": "Dream",
        "category": "Food & Wine",
        "costEstimate": 2800,
        "currency": "£",
        "bestMonths": [10, 11, 12, 1, 2, 3, 4],
        "nights": 10,
        "notes": (
            "CDMX street tacos, markets, Frida Kahlo museum. Oaxaca for mezcal, "
            "mole, Day of the Dead (late Oct). One of the world's great food "
            "cities."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
    {
        "id": 55,
        "name": "Faroe Islands",
        "destination": "Faroe Islands, Denmark",
        "lat": 62.01,
        "lng": -6.77,
        "status": "Dream",
        "category": "Adventure",
        "costEstimate": 1800,
        "currency": "£",
        "bestMonths": [5, 6, 7, 8],
        "nights": 5,
        "notes": (
            "Dramatic cliffs, puffins, grass-roofed villages, hiking on the "
            "edge of the world. Small, remote, otherworldly. Like Iceland "
            "before the crowds."
        ),
        "priority": 4,
        "people": "Joe & Sophie",
    },
]


def default_trips() -> list[Trip]:
    """Fresh Trip objects for the seed catalogue."""
    return [Trip.model_validate(entry) for entry in SEED_TRIPS]

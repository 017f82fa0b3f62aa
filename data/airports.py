"""
World airport table.

Slots are daily movements available to the player; runway length is in
metres. Every new game works on its own copy of this list.
"""

from core.models import Airport, AirportScale

MEGA = AirportScale.MEGA
HUB = AirportScale.HUB
MAJOR = AirportScale.MAJOR
REGIONAL = AirportScale.REGIONAL

_AIRPORTS = [
    # code, name, country, lat, lon, scale, slots, runway
    # Korea
    ("ICN", "Seoul Incheon", "KR", 37.4602, 126.4407, MEGA, 1200, 4000),
    ("GMP", "Seoul Gimpo", "KR", 37.5583, 126.7906, HUB, 600, 3600),
    ("PUS", "Busan Gimhae", "KR", 35.1795, 128.9382, MAJOR, 400, 3200),
    ("CJU", "Jeju", "KR", 33.5113, 126.4930, MAJOR, 450, 3180),
    ("TAE", "Daegu", "KR", 35.8941, 128.6589, REGIONAL, 120, 2755),
    ("CJJ", "Cheongju", "KR", 36.7166, 127.4991, REGIONAL, 120, 2744),
    # Taiwan
    ("TPE", "Taipei Taoyuan", "TW", 25.0797, 121.2342, HUB, 800, 3800),
    ("KHH", "Kaohsiung", "TW", 22.5771, 120.3500, MAJOR, 250, 3150),
    # Japan
    ("HND", "Tokyo Haneda", "JP", 35.5494, 139.7798, MEGA, 1300, 3360),
    ("NRT", "Tokyo Narita", "JP", 35.7720, 140.3929, HUB, 800, 4000),
    ("KIX", "Osaka Kansai", "JP", 34.4347, 135.2440, HUB, 700, 4000),
    ("FUK", "Fukuoka", "JP", 33.5859, 130.4507, MAJOR, 400, 2800),
    ("CTS", "Sapporo New Chitose", "JP", 42.7752, 141.6923, MAJOR, 400, 3000),
    ("OKA", "Okinawa Naha", "JP", 26.1958, 127.6459, REGIONAL, 250, 3000),
    # China and Hong Kong
    ("PEK", "Beijing Capital", "CN", 40.0799, 116.6031, MEGA, 1400, 3800),
    ("PVG", "Shanghai Pudong", "CN", 31.1443, 121.8083, MEGA, 1300, 4000),
    ("CAN", "Guangzhou Baiyun", "CN", 23.3924, 113.2988, HUB, 1000, 3800),
    ("CTU", "Chengdu Shuangliu", "CN", 30.5785, 103.9471, HUB, 900, 3600),
    ("XIY", "Xi'an Xianyang", "CN", 34.4471, 108.7516, MAJOR, 500, 3800),
    ("HKG", "Hong Kong", "HK", 22.3080, 113.9185, MEGA, 1100, 3800),
    # South-east and south Asia
    ("SIN", "Singapore Changi", "SG", 1.3644, 103.9915, MEGA, 1100, 4000),
    ("BKK", "Bangkok Suvarnabhumi", "TH", 13.6900, 100.7501, HUB, 900, 4000),
    ("HKT", "Phuket", "TH", 8.1132, 98.3169, REGIONAL, 200, 3000),
    ("CNX", "Chiang Mai", "TH", 18.7668, 98.9626, REGIONAL, 150, 3100),
    ("SGN", "Ho Chi Minh City", "VN", 10.8188, 106.6520, HUB, 700, 3800),
    ("HAN", "Hanoi Noi Bai", "VN", 21.2212, 105.8072, MAJOR, 500, 3800),
    ("DAD", "Da Nang", "VN", 16.0439, 108.1993, REGIONAL, 200, 3048),
    ("MNL", "Manila", "PH", 14.5086, 121.0194, HUB, 700, 3737),
    ("DEL", "Delhi", "IN", 28.5562, 77.1000, HUB, 1000, 4430),
    # Middle East
    ("DXB", "Dubai", "AE", 25.2532, 55.3657, MEGA, 1200, 4447),
    ("DOH", "Doha Hamad", "QA", 25.2731, 51.6081, HUB, 800, 4850),
    ("IST", "Istanbul", "TR", 41.2753, 28.7519, MEGA, 1300, 4100),
    # Europe
    ("LHR", "London Heathrow", "GB", 51.4700, -0.4543, MEGA, 1300, 3902),
    ("LGW", "London Gatwick", "GB", 51.1537, -0.1821, MAJOR, 600, 3316),
    ("MAN", "Manchester", "GB", 53.3537, -2.2750, MAJOR, 450, 3048),
    ("EDI", "Edinburgh", "GB", 55.9500, -3.3725, REGIONAL, 250, 2556),
    ("CDG", "Paris Charles de Gaulle", "FR", 49.0097, 2.5479, MEGA, 1300, 4215),
    ("NCE", "Nice", "FR", 43.6584, 7.2159, REGIONAL, 250, 2960),
    ("FRA", "Frankfurt", "DE", 50.0379, 8.5622, MEGA, 1300, 4000),
    ("MUC", "Munich", "DE", 48.3537, 11.7750, HUB, 900, 4000),
    ("AMS", "Amsterdam Schiphol", "NL", 52.3105, 4.7683, HUB, 1100, 3800),
    ("MAD", "Madrid Barajas", "ES", 40.4983, -3.5676, HUB, 900, 4350),
    ("BCN", "Barcelona", "ES", 41.2974, 2.0833, MAJOR, 600, 3352),
    ("FCO", "Rome Fiumicino", "IT", 41.8003, 12.2389, HUB, 800, 3900),
    # Americas
    ("JFK", "New York JFK", "US", 40.6413, -73.7781, MEGA, 1300, 4423),
    ("LAX", "Los Angeles", "US", 33.9416, -118.4085, MEGA, 1400, 3939),
    ("SFO", "San Francisco", "US", 37.6213, -122.3790, HUB, 900, 3618),
    ("ORD", "Chicago O'Hare", "US", 41.9742, -87.9073, MEGA, 1500, 3962),
    ("ATL", "Atlanta", "US", 33.6407, -84.4277, MEGA, 1600, 3776),
    ("SEA", "Seattle-Tacoma", "US", 47.4502, -122.3088, MAJOR, 700, 3627),
    ("LAS", "Las Vegas", "US", 36.0840, -115.1537, MAJOR, 700, 4423),
    ("ASE", "Aspen", "US", 39.2232, -106.8690, REGIONAL, 60, 2442),
    ("YVR", "Vancouver", "CA", 49.1967, -123.1815, HUB, 700, 3505),
    ("YYZ", "Toronto Pearson", "CA", 43.6777, -79.6248, HUB, 1000, 3389),
    ("MEX", "Mexico City", "MX", 19.4361, -99.0719, HUB, 900, 3985),
    ("GRU", "Sao Paulo Guarulhos", "BR", -23.4356, -46.4731, HUB, 900, 3700),
    # Oceania
    ("SYD", "Sydney", "AU", -33.9399, 151.1753, HUB, 900, 3962),
    ("MEL", "Melbourne", "AU", -37.6690, 144.8410, MAJOR, 700, 3657),
    ("PER", "Perth", "AU", -31.9385, 115.9672, MAJOR, 400, 3444),
    # Africa
    ("JNB", "Johannesburg", "ZA", -26.1367, 28.2411, HUB, 700, 4418),
    ("CAI", "Cairo", "EG", 30.1219, 31.4056, MAJOR, 600, 4000),
    ("ADD", "Addis Ababa", "ET", 8.9779, 38.7993, MAJOR, 500, 3800),
    ("NBO", "Nairobi", "KE", -1.3192, 36.9278, MAJOR, 400, 4117),
]

AIRPORTS = [
    Airport(code=code, name=name, country=country, lat=lat, lon=lon,
            scale=scale, slots=slots, runway_length=runway)
    for code, name, country, lat, lon, scale, slots, runway in _AIRPORTS
]

# Built-in vehicle catalog.
# efficiency: km/kWh for electric, km/L for everything else; price in thousands.

VEHICLE_ROWS = [
    {"name": "Tesla Model 3", "type": "electric", "range_km": 576, "seats": 5, "trunk_liters": 425, "efficiency": 6.9,
     "family_friendly": 7, "price": 42, "city": 9, "highway": 10, "offroad": 3},
    {"name": "Tesla Model Y", "type": "electric", "range_km": 533, "seats": 5, "trunk_liters": 854, "efficiency": 6.0,
     "family_friendly": 8, "price": 49, "city": 9, "highway": 9, "offroad": 4},
    {"name": "Hyundai Ioniq 5", "type": "electric", "range_km": 488, "seats": 5, "trunk_liters": 531, "efficiency": 5.7,
     "family_friendly": 8, "price": 41, "city": 9, "highway": 9, "offroad": 3},
    {"name": "Kia EV6", "type": "electric", "range_km": 499, "seats": 5, "trunk_liters": 490, "efficiency": 5.8,
     "family_friendly": 7, "price": 43, "city": 9, "highway": 9, "offroad": 4},
    {"name": "Ford Mustang Mach-E", "type": "electric", "range_km": 490, "seats": 5, "trunk_liters": 840, "efficiency": 5.4,
     "family_friendly": 7, "price": 48, "city": 8, "highway": 9, "offroad": 5},
    {"name": "Volkswagen ID.4", "type": "electric", "range_km": 410, "seats": 5, "trunk_liters": 543, "efficiency": 5.2,
     "family_friendly": 8, "price": 40, "city": 8, "highway": 8, "offroad": 4},
    {"name": "Nissan Leaf", "type": "electric", "range_km": 349, "seats": 5, "trunk_liters": 435, "efficiency": 5.9,
     "family_friendly": 6, "price": 28, "city": 9, "highway": 7, "offroad": 2},
    {"name": "Chevrolet Bolt EUV", "type": "electric", "range_km": 397, "seats": 5, "trunk_liters": 462, "efficiency": 6.0,
     "family_friendly": 6, "price": 33, "city": 8, "highway": 7, "offroad": 3},
    {"name": "Toyota Prius", "type": "hybrid", "range_km": 950, "seats": 5, "trunk_liters": 457, "efficiency": 24.5,
     "family_friendly": 6, "price": 28, "city": 9, "highway": 8, "offroad": 2},
    {"name": "Honda Insight", "type": "hybrid", "range_km": 850, "seats": 5, "trunk_liters": 428, "efficiency": 21.3,
     "family_friendly": 6, "price": 26, "city": 9, "highway": 8, "offroad": 2},
    {"name": "Toyota RAV4 Hybrid", "type": "hybrid", "range_km": 900, "seats": 5, "trunk_liters": 580, "efficiency": 18.7,
     "family_friendly": 8, "price": 32, "city": 8, "highway": 8, "offroad": 5},
    {"name": "Toyota Camry Hybrid", "type": "hybrid", "range_km": 980, "seats": 5, "trunk_liters": 428, "efficiency": 20.4,
     "family_friendly": 7, "price": 30, "city": 8, "highway": 9, "offroad": 2},
    {"name": "Hyundai Ioniq Hybrid", "type": "hybrid", "range_km": 850, "seats": 5, "trunk_liters": 443, "efficiency": 22.1,
     "family_friendly": 6, "price": 24, "city": 9, "highway": 8, "offroad": 2},
    {"name": "Kia Niro Hybrid", "type": "hybrid", "range_km": 888, "seats": 5, "trunk_liters": 548, "efficiency": 19.6,
     "family_friendly": 7, "price": 27, "city": 8, "highway": 8, "offroad": 3},
    {"name": "Toyota RAV4", "type": "suv", "range_km": 680, "seats": 5, "trunk_liters": 580, "efficiency": 13.2,
     "family_friendly": 8, "price": 28, "city": 7, "highway": 8, "offroad": 6},
    {"name": "Honda CR-V", "type": "suv", "range_km": 650, "seats": 5, "trunk_liters": 590, "efficiency": 12.8,
     "family_friendly": 8, "price": 29, "city": 7, "highway": 8, "offroad": 5},
    {"name": "Ford Explorer", "type": "suv", "range_km": 720, "seats": 7, "trunk_liters": 800, "efficiency": 10.2,
     "family_friendly": 9, "price": 38, "city": 6, "highway": 8, "offroad": 7},
    {"name": "Toyota Highlander", "type": "suv", "range_km": 700, "seats": 8, "trunk_liters": 835, "efficiency": 11.1,
     "family_friendly": 9, "price": 38, "city": 7, "highway": 8, "offroad": 6},
    {"name": "Jeep Grand Cherokee", "type": "suv", "range_km": 680, "seats": 5, "trunk_liters": 740, "efficiency": 9.8,
     "family_friendly": 7, "price": 42, "city": 6, "highway": 7, "offroad": 9},
    {"name": "Subaru Outback", "type": "suv", "range_km": 710, "seats": 5, "trunk_liters": 920, "efficiency": 12.3,
     "family_friendly": 7, "price": 29, "city": 7, "highway": 8, "offroad": 8},
    {"name": "Honda Odyssey", "type": "minivan", "range_km": 750, "seats": 8, "trunk_liters": 929, "efficiency": 11.9,
     "family_friendly": 10, "price": 34, "city": 8, "highway": 8, "offroad": 3},
    {"name": "Toyota Sienna", "type": "minivan", "range_km": 800, "seats": 8, "trunk_liters": 949, "efficiency": 15.3,
     "family_friendly": 10, "price": 36, "city": 8, "highway": 8, "offroad": 3},
    {"name": "Chrysler Pacifica", "type": "minivan", "range_km": 720, "seats": 7, "trunk_liters": 915, "efficiency": 10.6,
     "family_friendly": 9, "price": 37, "city": 7, "highway": 8, "offroad": 3},
    {"name": "Kia Carnival", "type": "minivan", "range_km": 710, "seats": 8, "trunk_liters": 1041, "efficiency": 11.1,
     "family_friendly": 9, "price": 33, "city": 7, "highway": 8, "offroad": 3},
    {"name": "Toyota Camry", "type": "sedan", "range_km": 800, "seats": 5, "trunk_liters": 428, "efficiency": 14.9,
     "family_friendly": 7, "price": 26, "city": 8, "highway": 9, "offroad": 2},
    {"name": "Honda Accord", "type": "sedan", "range_km": 790, "seats": 5, "trunk_liters": 473, "efficiency": 15.3,
     "family_friendly": 7, "price": 27, "city": 8, "highway": 9, "offroad": 2},
    {"name": "Toyota Corolla", "type": "sedan", "range_km": 750, "seats": 5, "trunk_liters": 371, "efficiency": 16.2,
     "family_friendly": 6, "price": 22, "city": 9, "highway": 8, "offroad": 2},
    {"name": "Honda Civic", "type": "sedan", "range_km": 740, "seats": 5, "trunk_liters": 428, "efficiency": 15.7,
     "family_friendly": 6, "price": 23, "city": 9, "highway": 8, "offroad": 2},
    {"name": "Mazda 3", "type": "compact", "range_km": 690, "seats": 5, "trunk_liters": 374, "efficiency": 14.5,
     "family_friendly": 5, "price": 22, "city": 8, "highway": 8, "offroad": 2},
    {"name": "Volkswagen Golf", "type": "compact", "range_km": 680, "seats": 5, "trunk_liters": 380, "efficiency": 14.1,
     "family_friendly": 5, "price": 24, "city": 8, "highway": 8, "offroad": 2},
    {"name": "Hyundai Elantra", "type": "compact", "range_km": 720, "seats": 5, "trunk_liters": 402, "efficiency": 15.3,
     "family_friendly": 5, "price": 21, "city": 8, "highway": 8, "offroad": 2},
    {"name": "Kia Forte", "type": "compact", "range_km": 710, "seats": 5, "trunk_liters": 434, "efficiency": 14.9,
     "family_friendly": 5, "price": 20, "city": 8, "highway": 8, "offroad": 2},
]

"""Static city reference table for nearby-city lookups (India)"""

from typing import Tuple

from gadizone_pricing.domain.models import GeoPoint

# name, slug, latitude, longitude, state
CITY_COORDINATES: Tuple[GeoPoint, ...] = (
    # Maharashtra
    GeoPoint("Mumbai", "mumbai", 19.076, 72.8777, "Maharashtra"),
    GeoPoint("Pune", "pune", 18.5204, 73.8567, "Maharashtra"),
    GeoPoint("Nagpur", "nagpur", 21.1458, 79.0882, "Maharashtra"),
    GeoPoint("Thane", "thane", 19.2183, 72.9781, "Maharashtra"),
    GeoPoint("Nashik", "nashik", 19.9975, 73.7898, "Maharashtra"),
    GeoPoint("Aurangabad", "aurangabad", 19.8762, 75.3433, "Maharashtra"),
    GeoPoint("Solapur", "solapur", 17.6599, 75.9064, "Maharashtra"),
    GeoPoint("Kolhapur", "kolhapur", 16.7050, 74.2433, "Maharashtra"),
    GeoPoint("Navi Mumbai", "navi-mumbai", 19.0330, 73.0297, "Maharashtra"),
    GeoPoint("Amravati", "amravati", 20.9374, 77.7796, "Maharashtra"),
    GeoPoint("Sangli", "sangli", 16.8524, 74.5815, "Maharashtra"),
    GeoPoint("Ahmednagar", "ahmednagar", 19.0948, 74.7480, "Maharashtra"),
    GeoPoint("Latur", "latur", 18.4088, 76.5604, "Maharashtra"),
    GeoPoint("Dhule", "dhule", 20.9042, 74.7749, "Maharashtra"),
    GeoPoint("Akola", "akola", 20.7002, 77.0082, "Maharashtra"),
    GeoPoint("Jalgaon", "jalgaon", 21.0077, 75.5626, "Maharashtra"),
    GeoPoint("Chandrapur", "chandrapur", 19.9615, 79.2961, "Maharashtra"),
    GeoPoint("Parbhani", "parbhani", 19.2704, 76.7747, "Maharashtra"),
    GeoPoint("Satara", "satara", 17.6805, 74.0183, "Maharashtra"),
    GeoPoint("Ratnagiri", "ratnagiri", 16.9902, 73.3120, "Maharashtra"),
    # Delhi NCR
    GeoPoint("Delhi", "delhi", 28.7041, 77.1025, "Delhi"),
    GeoPoint("New Delhi", "new-delhi", 28.6139, 77.2090, "Delhi"),
    GeoPoint("Noida", "noida", 28.5355, 77.3910, "Uttar Pradesh"),
    GeoPoint("Gurgaon", "gurgaon", 28.4595, 77.0266, "Haryana"),
    GeoPoint("Faridabad", "faridabad", 28.4089, 77.3178, "Haryana"),
    GeoPoint("Ghaziabad", "ghaziabad", 28.6692, 77.4538, "Uttar Pradesh"),
    GeoPoint("Greater Noida", "greater-noida", 28.4744, 77.5040, "Uttar Pradesh"),
    # Karnataka
    GeoPoint("Bangalore", "bangalore", 12.9716, 77.5946, "Karnataka"),
    GeoPoint("Mysore", "mysore", 12.2958, 76.6394, "Karnataka"),
    GeoPoint("Hubli", "hubli", 15.3647, 75.1240, "Karnataka"),
    GeoPoint("Mangalore", "mangalore", 12.9141, 74.8560, "Karnataka"),
    GeoPoint("Belgaum", "belgaum", 15.8497, 74.4977, "Karnataka"),
    GeoPoint("Gulbarga", "gulbarga", 17.3297, 76.8343, "Karnataka"),
    GeoPoint("Davangere", "davangere", 14.4644, 75.9218, "Karnataka"),
    GeoPoint("Bellary", "bellary", 15.1394, 76.9214, "Karnataka"),
    GeoPoint("Shimoga", "shimoga", 13.9299, 75.5681, "Karnataka"),
    GeoPoint("Tumkur", "tumkur", 13.3379, 77.1173, "Karnataka"),
    GeoPoint("Bijapur", "bijapur", 16.8302, 75.7100, "Karnataka"),
    GeoPoint("Raichur", "raichur", 16.2076, 77.3463, "Karnataka"),
    GeoPoint("Hassan", "hassan", 13.0068, 76.1004, "Karnataka"),
    GeoPoint("Bidar", "bidar", 17.9104, 77.5199, "Karnataka"),
    # Tamil Nadu
    GeoPoint("Chennai", "chennai", 13.0827, 80.2707, "Tamil Nadu"),
    GeoPoint("Coimbatore", "coimbatore", 11.0168, 76.9558, "Tamil Nadu"),
    GeoPoint("Madurai", "madurai", 9.9252, 78.1198, "Tamil Nadu"),
    GeoPoint("Trichy", "trichy", 10.7905, 78.7047, "Tamil Nadu"),
    GeoPoint("Salem", "salem", 11.6643, 78.1460, "Tamil Nadu"),
    GeoPoint("Tirunelveli", "tirunelveli", 8.7139, 77.7567, "Tamil Nadu"),
    GeoPoint("Erode", "erode", 11.3410, 77.7172, "Tamil Nadu"),
    GeoPoint("Vellore", "vellore", 12.9165, 79.1325, "Tamil Nadu"),
    GeoPoint("Thanjavur", "thanjavur", 10.7870, 79.1378, "Tamil Nadu"),
    GeoPoint("Tirupur", "tirupur", 11.1085, 77.3411, "Tamil Nadu"),
    GeoPoint("Dindigul", "dindigul", 10.3624, 77.9695, "Tamil Nadu"),
    GeoPoint("Nagercoil", "nagercoil", 8.1833, 77.4119, "Tamil Nadu"),
    GeoPoint("Kanchipuram", "kanchipuram", 12.8342, 79.7036, "Tamil Nadu"),
    GeoPoint("Cuddalore", "cuddalore", 11.7480, 79.7714, "Tamil Nadu"),
    GeoPoint("Pondicherry", "pondicherry", 11.9416, 79.8083, "Puducherry"),
    # Telangana
    GeoPoint("Hyderabad", "hyderabad", 17.3850, 78.4867, "Telangana"),
    GeoPoint("Warangal", "warangal", 17.9784, 79.5941, "Telangana"),
    GeoPoint("Nizamabad", "nizamabad", 18.6725, 78.0941, "Telangana"),
    GeoPoint("Karimnagar", "karimnagar", 18.4386, 79.1288, "Telangana"),
    GeoPoint("Khammam", "khammam", 17.2473, 80.1514, "Telangana"),
    GeoPoint("Mahbubnagar", "mahbubnagar", 16.7488, 78.0035, "Telangana"),
    GeoPoint("Nalgonda", "nalgonda", 17.0575, 79.2690, "Telangana"),
    GeoPoint("Secunderabad", "secunderabad", 17.4399, 78.4983, "Telangana"),
    # Andhra Pradesh
    GeoPoint("Vijayawada", "vijayawada", 16.5062, 80.6480, "Andhra Pradesh"),
    GeoPoint("Visakhapatnam", "visakhapatnam", 17.6868, 83.2185, "Andhra Pradesh"),
    GeoPoint("Guntur", "guntur", 16.3067, 80.4365, "Andhra Pradesh"),
    GeoPoint("Nellore", "nellore", 14.4426, 79.9865, "Andhra Pradesh"),
    GeoPoint("Kurnool", "kurnool", 15.8281, 78.0373, "Andhra Pradesh"),
    GeoPoint("Rajahmundry", "rajahmundry", 17.0005, 81.8040, "Andhra Pradesh"),
    GeoPoint("Tirupati", "tirupati", 13.6288, 79.4192, "Andhra Pradesh"),
    GeoPoint("Kadapa", "kadapa", 14.4674, 78.8241, "Andhra Pradesh"),
    GeoPoint("Kakinada", "kakinada", 16.9891, 82.2475, "Andhra Pradesh"),
    GeoPoint("Anantapur", "anantapur", 14.6819, 77.6006, "Andhra Pradesh"),
    GeoPoint("Eluru", "eluru", 16.7107, 81.0952, "Andhra Pradesh"),
    GeoPoint("Ongole", "ongole", 15.5057, 80.0499, "Andhra Pradesh"),
    GeoPoint("Chittoor", "chittoor", 13.2172, 79.1003, "Andhra Pradesh"),
    # Gujarat
    GeoPoint("Ahmedabad", "ahmedabad", 23.0225, 72.5714, "Gujarat"),
    GeoPoint("Surat", "surat", 21.1702, 72.8311, "Gujarat"),
    GeoPoint("Vadodara", "vadodara", 22.3072, 73.1812, "Gujarat"),
    GeoPoint("Rajkot", "rajkot", 22.3039, 70.8022, "Gujarat"),
    GeoPoint("Bhavnagar", "bhavnagar", 21.7645, 72.1519, "Gujarat"),
    GeoPoint("Jamnagar", "jamnagar", 22.4707, 70.0577, "Gujarat"),
    GeoPoint("Junagadh", "junagadh", 21.5222, 70.4579, "Gujarat"),
    GeoPoint("Gandhinagar", "gandhinagar", 23.2156, 72.6369, "Gujarat"),
    GeoPoint("Anand", "anand", 22.5645, 72.9289, "Gujarat"),
    GeoPoint("Bharuch", "bharuch", 21.7051, 72.9959, "Gujarat"),
    GeoPoint("Mehsana", "mehsana", 23.5880, 72.3693, "Gujarat"),
    GeoPoint("Morbi", "morbi", 22.8173, 70.8370, "Gujarat"),
    GeoPoint("Nadiad", "nadiad", 22.6916, 72.8634, "Gujarat"),
    GeoPoint("Porbandar", "porbandar", 21.6417, 69.6293, "Gujarat"),
    GeoPoint("Vapi", "vapi", 20.3893, 72.9106, "Gujarat"),
    # Rajasthan
    GeoPoint("Jaipur", "jaipur", 26.9124, 75.7873, "Rajasthan"),
    GeoPoint("Jodhpur", "jodhpur", 26.2389, 73.0243, "Rajasthan"),
    GeoPoint("Udaipur", "udaipur", 24.5854, 73.7125, "Rajasthan"),
    GeoPoint("Kota", "kota", 25.2138, 75.8648, "Rajasthan"),
    GeoPoint("Bikaner", "bikaner", 28.0229, 73.3119, "Rajasthan"),
    GeoPoint("Ajmer", "ajmer", 26.4499, 74.6399, "Rajasthan"),
    GeoPoint("Bhilwara", "bhilwara", 25.3407, 74.6313, "Rajasthan"),
    GeoPoint("Alwar", "alwar", 27.5530, 76.6346, "Rajasthan"),
    GeoPoint("Bharatpur", "bharatpur", 27.2152, 77.5030, "Rajasthan"),
    GeoPoint("Sikar", "sikar", 27.6094, 75.1399, "Rajasthan"),
    GeoPoint("Pali", "pali", 25.7711, 73.3234, "Rajasthan"),
    GeoPoint("Sri Ganganagar", "sri-ganganagar", 29.9038, 73.8772, "Rajasthan"),
    GeoPoint("Jhunjhunu", "jhunjhunu", 28.1290, 75.3983, "Rajasthan"),
    GeoPoint("Churu", "churu", 28.3034, 74.9672, "Rajasthan"),
    GeoPoint("Hanumangarh", "hanumangarh", 29.5817, 74.3294, "Rajasthan"),
    # West Bengal
    GeoPoint("Kolkata", "kolkata", 22.5726, 88.3639, "West Bengal"),
    GeoPoint("Howrah", "howrah", 22.5958, 88.2636, "West Bengal"),
    GeoPoint("Durgapur", "durgapur", 23.5204, 87.3119, "West Bengal"),
    GeoPoint("Asansol", "asansol", 23.6739, 86.9524, "West Bengal"),
    GeoPoint("Siliguri", "siliguri", 26.7271, 88.6393, "West Bengal"),
    GeoPoint("Bardhaman", "bardhaman", 23.2324, 87.8615, "West Bengal"),
    GeoPoint("Kharagpur", "kharagpur", 22.3460, 87.2320, "West Bengal"),
    GeoPoint("Haldia", "haldia", 22.0667, 88.0698, "West Bengal"),
    GeoPoint("Baharampur", "baharampur", 24.1026, 88.2514, "West Bengal"),
    GeoPoint("Malda", "malda", 25.0108, 88.1411, "West Bengal"),
    # Punjab
    GeoPoint("Ludhiana", "ludhiana", 30.9010, 75.8573, "Punjab"),
    GeoPoint("Amritsar", "amritsar", 31.6340, 74.8723, "Punjab"),
    GeoPoint("Jalandhar", "jalandhar", 31.3260, 75.5762, "Punjab"),
    GeoPoint("Patiala", "patiala", 30.3398, 76.3869, "Punjab"),
    GeoPoint("Bathinda", "bathinda", 30.2110, 74.9455, "Punjab"),
    GeoPoint("Mohali", "mohali", 30.7046, 76.7179, "Punjab"),
    GeoPoint("Pathankot", "pathankot", 32.2643, 75.6421, "Punjab"),
    GeoPoint("Hoshiarpur", "hoshiarpur", 31.5143, 75.9115, "Punjab"),
    GeoPoint("Moga", "moga", 30.8162, 75.1741, "Punjab"),
    # Haryana
    GeoPoint("Chandigarh", "chandigarh", 30.7333, 76.7794, "Chandigarh"),
    GeoPoint("Ambala", "ambala", 30.3782, 76.7767, "Haryana"),
    GeoPoint("Panipat", "panipat", 29.3909, 76.9635, "Haryana"),
    GeoPoint("Karnal", "karnal", 29.6857, 76.9905, "Haryana"),
    GeoPoint("Rohtak", "rohtak", 28.8955, 76.6066, "Haryana"),
    GeoPoint("Hisar", "hisar", 29.1492, 75.7217, "Haryana"),
    GeoPoint("Sonipat", "sonipat", 28.9286, 77.0914, "Haryana"),
    GeoPoint("Yamunanagar", "yamunanagar", 30.1290, 77.2674, "Haryana"),
    GeoPoint("Panchkula", "panchkula", 30.6942, 76.8606, "Haryana"),
    GeoPoint("Bhiwani", "bhiwani", 28.7975, 76.1397, "Haryana"),
    GeoPoint("Sirsa", "sirsa", 29.5349, 75.0289, "Haryana"),
    # Kerala
    GeoPoint("Kochi", "kochi", 9.9312, 76.2673, "Kerala"),
    GeoPoint("Thiruvananthapuram", "trivandrum", 8.5241, 76.9366, "Kerala"),
    GeoPoint("Kozhikode", "kozhikode", 11.2588, 75.7804, "Kerala"),
    GeoPoint("Thrissur", "thrissur", 10.5276, 76.2144, "Kerala"),
    GeoPoint("Kollam", "kollam", 8.8932, 76.6141, "Kerala"),
    GeoPoint("Alappuzha", "alappuzha", 9.4981, 76.3388, "Kerala"),
    GeoPoint("Palakkad", "palakkad", 10.7867, 76.6548, "Kerala"),
    GeoPoint("Kannur", "kannur", 11.8745, 75.3704, "Kerala"),
    GeoPoint("Kottayam", "kottayam", 9.5916, 76.5222, "Kerala"),
    GeoPoint("Malappuram", "malappuram", 11.0510, 76.0711, "Kerala"),
    # Uttar Pradesh
    GeoPoint("Lucknow", "lucknow", 26.8467, 80.9462, "Uttar Pradesh"),
    GeoPoint("Kanpur", "kanpur", 26.4499, 80.3319, "Uttar Pradesh"),
    GeoPoint("Varanasi", "varanasi", 25.3176, 82.9739, "Uttar Pradesh"),
    GeoPoint("Agra", "agra", 27.1767, 78.0081, "Uttar Pradesh"),
    GeoPoint("Prayagraj", "prayagraj", 25.4358, 81.8463, "Uttar Pradesh"),
    GeoPoint("Meerut", "meerut", 28.9845, 77.7064, "Uttar Pradesh"),
    GeoPoint("Bareilly", "bareilly", 28.3670, 79.4304, "Uttar Pradesh"),
    GeoPoint("Aligarh", "aligarh", 27.8974, 78.0880, "Uttar Pradesh"),
    GeoPoint("Moradabad", "moradabad", 28.8386, 78.7733, "Uttar Pradesh"),
    GeoPoint("Gorakhpur", "gorakhpur", 26.7606, 83.3732, "Uttar Pradesh"),
    GeoPoint("Saharanpur", "saharanpur", 29.9680, 77.5510, "Uttar Pradesh"),
    GeoPoint("Jhansi", "jhansi", 25.4484, 78.5685, "Uttar Pradesh"),
    GeoPoint("Mathura", "mathura", 27.4924, 77.6737, "Uttar Pradesh"),
    GeoPoint("Firozabad", "firozabad", 27.1591, 78.3957, "Uttar Pradesh"),
    GeoPoint("Muzaffarnagar", "muzaffarnagar", 29.4727, 77.7085, "Uttar Pradesh"),
    GeoPoint("Shahjahanpur", "shahjahanpur", 27.8806, 79.9050, "Uttar Pradesh"),
    GeoPoint("Ayodhya", "ayodhya", 26.7922, 82.1998, "Uttar Pradesh"),
    GeoPoint("Hapur", "hapur", 28.7314, 77.7800, "Uttar Pradesh"),
    # Madhya Pradesh
    GeoPoint("Indore", "indore", 22.7196, 75.8577, "Madhya Pradesh"),
    GeoPoint("Bhopal", "bhopal", 23.2599, 77.4126, "Madhya Pradesh"),
    GeoPoint("Jabalpur", "jabalpur", 23.1815, 79.9864, "Madhya Pradesh"),
    GeoPoint("Gwalior", "gwalior", 26.2183, 78.1828, "Madhya Pradesh"),
    GeoPoint("Ujjain", "ujjain", 23.1765, 75.7885, "Madhya Pradesh"),
    GeoPoint("Sagar", "sagar", 23.8388, 78.7378, "Madhya Pradesh"),
    GeoPoint("Dewas", "dewas", 22.9676, 76.0534, "Madhya Pradesh"),
    GeoPoint("Satna", "satna", 24.6005, 80.8322, "Madhya Pradesh"),
    GeoPoint("Ratlam", "ratlam", 23.3315, 75.0367, "Madhya Pradesh"),
    GeoPoint("Rewa", "rewa", 24.5373, 81.3042, "Madhya Pradesh"),
    GeoPoint("Murwara", "murwara", 23.8315, 80.3930, "Madhya Pradesh"),
    GeoPoint("Singrauli", "singrauli", 24.1993, 82.6750, "Madhya Pradesh"),
    GeoPoint("Burhanpur", "burhanpur", 21.3104, 76.2305, "Madhya Pradesh"),
    GeoPoint("Khandwa", "khandwa", 21.8306, 76.3525, "Madhya Pradesh"),
    GeoPoint("Chhindwara", "chhindwara", 22.0574, 78.9382, "Madhya Pradesh"),
    # Bihar
    GeoPoint("Patna", "patna", 25.5941, 85.1376, "Bihar"),
    GeoPoint("Gaya", "gaya", 24.7914, 85.0002, "Bihar"),
    GeoPoint("Bhagalpur", "bhagalpur", 25.2425, 86.9842, "Bihar"),
    GeoPoint("Muzaffarpur", "muzaffarpur", 26.1209, 85.3647, "Bihar"),
    GeoPoint("Darbhanga", "darbhanga", 26.1542, 85.8918, "Bihar"),
    GeoPoint("Purnia", "purnia", 25.7771, 87.4753, "Bihar"),
    GeoPoint("Bihar Sharif", "bihar-sharif", 25.1982, 85.5239, "Bihar"),
    GeoPoint("Arrah", "arrah", 25.5541, 84.6603, "Bihar"),
    GeoPoint("Begusarai", "begusarai", 25.4182, 86.1272, "Bihar"),
    GeoPoint("Katihar", "katihar", 25.5313, 87.5713, "Bihar"),
    GeoPoint("Chapra", "chapra", 25.7839, 84.7319, "Bihar"),
    GeoPoint("Sasaram", "sasaram", 24.9509, 84.0315, "Bihar"),
    # Jharkhand
    GeoPoint("Ranchi", "ranchi", 23.3441, 85.3096, "Jharkhand"),
    GeoPoint("Jamshedpur", "jamshedpur", 22.8046, 86.2029, "Jharkhand"),
    GeoPoint("Dhanbad", "dhanbad", 23.7957, 86.4304, "Jharkhand"),
    GeoPoint("Bokaro", "bokaro", 23.6693, 86.1511, "Jharkhand"),
    GeoPoint("Hazaribagh", "hazaribagh", 23.9966, 85.3691, "Jharkhand"),
    GeoPoint("Deoghar", "deoghar", 24.4764, 86.6942, "Jharkhand"),
    GeoPoint("Giridih", "giridih", 24.1851, 86.3006, "Jharkhand"),
    GeoPoint("Ramgarh", "ramgarh", 23.6290, 85.5615, "Jharkhand"),
    # Odisha
    GeoPoint("Bhubaneswar", "bhubaneswar", 20.2961, 85.8245, "Odisha"),
    GeoPoint("Cuttack", "cuttack", 20.4625, 85.8830, "Odisha"),
    GeoPoint("Rourkela", "rourkela", 22.2604, 84.8536, "Odisha"),
    GeoPoint("Berhampur", "berhampur", 19.3150, 84.7941, "Odisha"),
    GeoPoint("Sambalpur", "sambalpur", 21.4669, 83.9756, "Odisha"),
    GeoPoint("Puri", "puri", 19.8135, 85.8312, "Odisha"),
    GeoPoint("Balasore", "balasore", 21.4934, 86.9135, "Odisha"),
    GeoPoint("Bhadrak", "bhadrak", 21.0583, 86.4958, "Odisha"),
    # Chhattisgarh
    GeoPoint("Raipur", "raipur", 21.2514, 81.6296, "Chhattisgarh"),
    GeoPoint("Bhilai", "bhilai", 21.2167, 81.4333, "Chhattisgarh"),
    GeoPoint("Bilaspur", "bilaspur", 22.0797, 82.1409, "Chhattisgarh"),
    GeoPoint("Korba", "korba", 22.3595, 82.7501, "Chhattisgarh"),
    GeoPoint("Durg", "durg", 21.1900, 81.2800, "Chhattisgarh"),
    GeoPoint("Rajnandgaon", "rajnandgaon", 21.0975, 81.0287, "Chhattisgarh"),
    GeoPoint("Jagdalpur", "jagdalpur", 19.0860, 82.0397, "Chhattisgarh"),
    GeoPoint("Raigarh", "raigarh", 21.8974, 83.3950, "Chhattisgarh"),
    # Assam
    GeoPoint("Guwahati", "guwahati", 26.1445, 91.7362, "Assam"),
    GeoPoint("Silchar", "silchar", 24.8333, 92.7789, "Assam"),
    GeoPoint("Dibrugarh", "dibrugarh", 27.4728, 94.9120, "Assam"),
    GeoPoint("Jorhat", "jorhat", 26.7509, 94.2037, "Assam"),
    GeoPoint("Nagaon", "nagaon", 26.3509, 92.6920, "Assam"),
    GeoPoint("Tinsukia", "tinsukia", 27.4884, 95.3547, "Assam"),
    GeoPoint("Tezpur", "tezpur", 26.6528, 92.7926, "Assam"),
    # Himachal Pradesh
    GeoPoint("Shimla", "shimla", 31.1048, 77.1734, "Himachal Pradesh"),
    GeoPoint("Dharamshala", "dharamshala", 32.2190, 76.3234, "Himachal Pradesh"),
    GeoPoint("Solan", "solan", 30.9045, 77.0967, "Himachal Pradesh"),
    GeoPoint("Mandi", "mandi", 31.7084, 76.9314, "Himachal Pradesh"),
    GeoPoint("Kullu", "kullu", 31.9579, 77.1089, "Himachal Pradesh"),
    GeoPoint("Manali", "manali", 32.2396, 77.1887, "Himachal Pradesh"),
    # Uttarakhand
    GeoPoint("Dehradun", "dehradun", 30.3165, 78.0322, "Uttarakhand"),
    GeoPoint("Haridwar", "haridwar", 29.9457, 78.1642, "Uttarakhand"),
    GeoPoint("Rishikesh", "rishikesh", 30.0869, 78.2676, "Uttarakhand"),
    GeoPoint("Haldwani", "haldwani", 29.2183, 79.5130, "Uttarakhand"),
    GeoPoint("Roorkee", "roorkee", 29.8543, 77.8880, "Uttarakhand"),
    GeoPoint("Kashipur", "kashipur", 29.2104, 78.9620, "Uttarakhand"),
    GeoPoint("Rudrapur", "rudrapur", 28.9762, 79.4045, "Uttarakhand"),
    GeoPoint("Nainital", "nainital", 29.3803, 79.4636, "Uttarakhand"),
    # Jammu & Kashmir
    GeoPoint("Srinagar", "srinagar", 34.0837, 74.7973, "Jammu and Kashmir"),
    GeoPoint("Jammu", "jammu", 32.7266, 74.8570, "Jammu and Kashmir"),
    GeoPoint("Anantnag", "anantnag", 33.7311, 75.1547, "Jammu and Kashmir"),
    GeoPoint("Baramulla", "baramulla", 34.2095, 74.3436, "Jammu and Kashmir"),
    GeoPoint("Udhampur", "udhampur", 32.9160, 75.1419, "Jammu and Kashmir"),
    # Goa
    GeoPoint("Panaji", "panaji", 15.4909, 73.8278, "Goa"),
    GeoPoint("Margao", "margao", 15.2832, 73.9862, "Goa"),
    GeoPoint("Vasco", "vasco", 15.3982, 73.8113, "Goa"),
    GeoPoint("Mapusa", "mapusa", 15.5916, 73.8087, "Goa"),
    GeoPoint("Ponda", "ponda", 15.4034, 74.0152, "Goa"),
    # Northeast
    GeoPoint("Imphal", "imphal", 24.8170, 93.9368, "Manipur"),
    GeoPoint("Shillong", "shillong", 25.5788, 91.8933, "Meghalaya"),
    GeoPoint("Aizawl", "aizawl", 23.7271, 92.7176, "Mizoram"),
    GeoPoint("Agartala", "agartala", 23.8315, 91.2868, "Tripura"),
    GeoPoint("Kohima", "kohima", 25.6751, 94.1086, "Nagaland"),
    GeoPoint("Itanagar", "itanagar", 27.0844, 93.6053, "Arunachal Pradesh"),
    GeoPoint("Gangtok", "gangtok", 27.3389, 88.6065, "Sikkim"),
)


def load_city_table() -> Tuple[GeoPoint, ...]:
    """City table used by price pages; loaded once per process"""
    return CITY_COORDINATES

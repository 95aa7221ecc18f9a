# accessnav/navigation/constants.py

class NavConstants:
    EARTH_RADIUS_NM: float = 3440.065
    FEET_PER_NAUTICAL_MILE: float = 6076.115

    # 3-degree glideslope expressed as a height gain per mile from the threshold
    GLIDESLOPE_FEET_PER_NM: float = 320.0
    GLIDESLOPE_DEG: float = 3.0

#!/usr/bin/env python3
"""
Convert a short GPS track to the local frame of a ground station

Shows the typed API for a single fix and the array API for the whole track.
"""

import numpy as np

import pygeoconv as geo
from pygeoconv.coordinate.aer_transforms import enu2aer
from pygeoconv.coordinate.transforms import lla2enu
from pygeoconv.logger import setup_logger


def main():
    logger = setup_logger("pygeoconv", "DEBUG")

    station = geo.LLA(38.897957, -77.036560, 30)
    track = np.array([
        [38.8709455, -77.0552551, 100.0],
        [38.8800000, -77.0450000, 450.0],
        [38.8950000, -77.0300000, 900.0],
    ])

    # Single fix, typed
    wgs = geo.wgs84()
    first = geo.LLA.from_array(track[0])
    aer = wgs.lla_to_enu(station, first).to_aer()
    logger.info("first fix: az=%s el=%s range=%s", aer.azimuth, aer.elevation, aer.range)

    # Whole track at once
    enu = lla2enu(track, station.to_array())
    for (az, el, rng) in enu2aer(enu):
        print(f"Azimuth: {az:7.2f} deg  Elevation: {el:6.2f} deg  Range: {rng:8.1f} m")

    # Great-circle distance requires zero altitude
    try:
        geo.haversine_distance(station, first)
    except geo.InvalidAltitudeError:
        ground = geo.haversine_distance(geo.LLA(station.latitude, station.longitude),
                                        geo.LLA(first.latitude, first.longitude))
        print(f"Ground distance: {ground}")


if __name__ == "__main__":
    main()

from swimstats.swimmer.profile import SwimmerProfile, build_swimmer, swimmer_profile

__all__ = ["SwimmerProfile", "build_swimmer", "swimmer_profile"]

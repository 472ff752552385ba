"""
Traffic simulation and campaign analytics for outdoor-advertising assets.
"""

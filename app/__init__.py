"""GameTracker API"""

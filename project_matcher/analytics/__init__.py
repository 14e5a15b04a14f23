"""
Summary statistics over a set of recommendations (average score, top
technologies, budget and domain blurbs).
"""

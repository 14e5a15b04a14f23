"""
Project recommendation engine.

Responsibilities:
- Score every active project listing against a freelancer survey
  (tech stack, budget, project type, domain, requirement similarity).
- Combine the component scores into a single weighted match percentage.
- Rank listings and explain the top matches (LLM with template fallback).
- Return structured recommendations ready for serialisation.
"""

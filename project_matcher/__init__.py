"""
Survey-driven freelance project matcher.

Subpackages:
- recommendations: scoring, ranking, explanations and the engine itself.
- analytics: insights computed over returned recommendations.
- llm: optional Groq-backed text generation.
"""

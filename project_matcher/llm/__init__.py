"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Send explanation prompts to the Groq chat completion API.
- Stay optional: the recommendation engine works without any credentials.
"""

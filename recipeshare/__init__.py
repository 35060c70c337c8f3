"""
RecipeShare client core.

Client-side request/response orchestration for the recipe-sharing backend:
- http_client: HTTP adapter (bearer auth, error mapping)
- services: Auth, Recipe and AI facades
- session: Session/identity store; guards: route gates
- library: Debounced, paginated recipe list controller
- assistant: Multi-step AI recipe wizard
- forms / editor / detail / account: Recipe form, detail and login flows
"""

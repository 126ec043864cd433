"""
Restaurant discovery engine.

Responsibilities:
- Narrow the static catalog to restaurants close to the user.
- Rank the working set through the popular, new and nearby pipelines.
- Assemble the non-empty pipeline outputs into titled sections.
"""

"""
Opportunity intelligence engine: pure derivations over ranked opportunities.

Modules
-------
signals   : SignalProfile + classify(): demand / momentum / buildability levels.
summary   : summarize(): catalog (lookup table) or signals summary text.
reasons   : ranking_reasons(): 1–3 "why this ranks highly" bullets.
questions : builder_questions(): fixed six-entry builder Q&A.
kpis      : compute_kpis(): command-center KPI ribbon.
insights  : generate_insights() + insights_for() + group_insights().
actions   : suggest_actions(): three builder action paths.
brief     : build_command_center() + build_brief(): view composition.

No module here performs I/O or keeps state between calls.
"""

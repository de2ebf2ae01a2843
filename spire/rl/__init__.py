"""
Agents for Spire battles.

The search code only depends on the simulation contract in
``spire.rl.simulation``, so any state object implementing it can be searched.
"""

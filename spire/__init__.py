"""
Spire - a stochastic card battle with an Expectimax MCTS agent.
"""

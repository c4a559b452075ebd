from arbiter.score import Arbiter, EvaluationResult, FeedbackItem, ScoreBreakdown, Weights, evaluate

__all__ = ["Arbiter", "EvaluationResult", "FeedbackItem", "ScoreBreakdown", "Weights", "evaluate"]

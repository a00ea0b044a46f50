"""
Suggestion generator - Personalized study advice from progress statistics.
"""

from pathtracker.schemas import LearningStage, ProgressStats


STAGE_TIPS = {
    LearningStage.STAGE1_BASICS: "🔧 Focus on Rust's basic syntax and getting your toolchain set up.",
    LearningStage.STAGE2_OWNERSHIP: "🔑 Ownership is the heart of Rust; practice it until borrowing feels natural.",
    LearningStage.STAGE3_ADVANCED: "🎨 Use Rust's advanced features to build larger, more expressive programs.",
    LearningStage.STAGE4_ECOSYSTEM: "🌐 Explore the ecosystem and get comfortable with popular crates.",
    LearningStage.STAGE5_PROJECTS: "💼 Combine everything you learned in real projects to build practical skill.",
}


def progress_suggestion(overall_progress: float) -> str:
    if overall_progress < 20:
        return "🎯 You are just getting started. Begin with the basics and study 30-60 minutes every day."
    if overall_progress < 50:
        return "📈 Good progress! Keep digging into the ownership system, Rust's core concept."
    if overall_progress < 80:
        return "🚀 You know the fundamentals now. Try some real projects to consolidate them."
    return "🏆 You have covered most of the material. Consider contributing to open source or building your own project."


def generate_suggestions(stats: ProgressStats) -> list[str]:
    """
    Build ordered study suggestions.

    Order: progress band, score band (if scored), study-hours band (if outside
    the 10-100 hour range), stage tip. Hours are whole hours of completed
    study, so 100 hours and 59 minutes still counts as 100.
    """
    suggestions = [progress_suggestion(stats.overall_progress)]

    if stats.average_score is not None:
        if stats.average_score < 70:
            suggestions.append("📚 Review earlier material to make sure the fundamentals are solid.")
        elif stats.average_score >= 90:
            suggestions.append("⭐ Your scores are excellent! Take on harder material or help other learners.")

    hours = stats.completed_time_minutes // 60
    if hours < 10:
        suggestions.append("⏰ Try to increase your study time; Rust takes steady practice to master.")
    elif hours > 100:
        suggestions.append("💪 You have invested a lot of time already. Keep going, it will pay off!")

    suggestions.append(STAGE_TIPS[stats.current_stage])
    return suggestions

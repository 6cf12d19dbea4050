"""Static FAQ copy shown alongside the plan wizard.

Content only. The systems named here (VDOT, heart rate zones) are
described for the reader and are not implemented by the generator.
"""

from pydantic import BaseModel, ConfigDict


class FAQEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    intro: str
    points: tuple[str, ...] = ()
    closing: tuple[str, ...] = ()


FAQ_ENTRIES: tuple[FAQEntry, ...] = (
    FAQEntry(
        question="How are the running plans generated?",
        intro=(
            "Our running plans are generated using a sophisticated algorithm based on established training "
            "principles used by coaches and exercise physiologists. Each plan follows a periodized training "
            "approach, which progressively builds volume and intensity while incorporating strategic recovery "
            "periods. The algorithm takes into account several key factors:"
        ),
        points=(
            "Your current fitness level and running volume",
            "Your specific goal (weight loss, general fitness, or race training)",
            "Your preferred training days and frequency",
            "Race distance and target times (for race training)",
            "Injury history and other personal factors",
        ),
        closing=(
            "Based on these inputs, we create a customized training schedule that follows established "
            "training principles such as progressive overload, specificity, and appropriate work-to-rest ratios.",
        ),
    ),
    FAQEntry(
        question="What training methodology do you use?",
        intro="Our training plans incorporate elements from several well-established methodologies:",
        points=(
            "Polarized Training: This approach emphasizes that the majority of training (about 80%) should be "
            "done at easy, aerobic intensities, while a smaller portion (about 20%) consists of high-intensity "
            "workouts. This methodology is supported by research showing it optimizes endurance adaptations "
            "while minimizing injury risk.",
            "Periodization: We structure training in phases that build upon each other, typically following a "
            "pattern of base building, strength/speed development, and peak/taper phases for race-specific plans.",
            "Progressive Overload: Plans gradually increase in volume and/or intensity to stimulate adaptation "
            "without overstressing the body.",
            "Specific Adaptation to Imposed Demands (SAID): Workouts become increasingly specific to your goal "
            "as you progress through the plan.",
        ),
        closing=(
            "These methodologies are adapted based on current research in exercise physiology and sports "
            "science to create effective, scientifically-sound training plans.",
        ),
    ),
    FAQEntry(
        question="How are training paces calculated?",
        intro="Training paces are calculated using a combination of methods adapted from well-established systems:",
        points=(
            "Jack Daniels' VDOT System: This system uses your recent race performances to determine appropriate "
            "training paces for different types of workouts. It accounts for the physiological relationship "
            "between race performances at different distances.",
            "Heart Rate Zones: For users who haven't provided race times, we estimate training paces based on "
            "typical heart rate zones as percentages of maximum heart rate or heart rate reserve.",
            "Effort-Based Adjustments: The algorithm adjusts paces based on factors like terrain (adding time "
            "for hilly or trail runs) and weather conditions.",
        ),
        closing=(
            "For race training plans, we use your target race time to calculate your goal race pace, then "
            "derive all training paces as percentages of this pace. For general fitness and weight loss plans, "
            "paces are based on your reported fitness level and current running volume.",
            "These calculated paces should be used as guidelines rather than strict rules. Always adjust based "
            "on how you feel, and prioritize completing workouts at the appropriate effort level rather than "
            "hitting exact pace targets.",
        ),
    ),
    FAQEntry(
        question="What is the science behind the different workout types?",
        intro="Each workout type in your plan targets specific physiological adaptations:",
        points=(
            "Easy Runs: Improve aerobic capacity, capillary density, and mitochondrial function while placing "
            "minimal stress on the body. These runs build endurance while allowing for recovery.",
            "Long Runs: Increase glycogen storage, improve fat utilization, enhance mental toughness, and "
            "condition your musculoskeletal system for prolonged efforts.",
            "Tempo Runs: Improve lactate threshold, which is the intensity at which lactate begins to "
            "accumulate in the bloodstream. This helps you sustain faster paces for longer periods.",
            "Interval Training: Enhances VO2max (maximal oxygen uptake), improves running economy, and increases "
            "anaerobic capacity by repeatedly stressing these systems with high-intensity efforts followed by "
            "recovery.",
            "Hill Repeats: Develop running-specific strength, power, and running economy while reducing impact "
            "forces compared to flat-ground speed work.",
            "Recovery Runs: Promote active recovery by increasing blood flow to muscles without adding "
            "significant training stress, helping clear metabolic waste products.",
        ),
        closing=(
            "The specific mix and progression of these workout types is tailored to your goal, current fitness "
            "level, and training history to maximize adaptations while minimizing injury risk.",
        ),
    ),
    FAQEntry(
        question="How accurate are the training plans for my goals?",
        intro=(
            "Our training plans are designed to be both effective and adaptable based on established training "
            "principles and scientific research. The accuracy for your specific situation depends on several "
            "factors:"
        ),
        points=(
            "Data Quality: The more accurate and complete information you provide about your current fitness, "
            "goals, and constraints, the more precisely tailored your plan will be.",
            "Individual Variability: People respond differently to training stimuli based on genetics, training "
            "history, recovery capacity, and other factors that cannot be fully captured in an algorithm.",
            "External Factors: Life stress, sleep quality, nutrition, and other variables can significantly "
            "impact training adaptations and are not factored into the plan generation.",
        ),
        closing=(
            "For weight loss plans, we focus on a combination of calorie expenditure and metabolic "
            "conditioning. For general fitness, we emphasize balanced development of endurance, strength, and "
            "speed. For race training, we incorporate race-specific preparation and appropriate tapering.",
            "While our plans provide a strong foundation based on scientific principles, they should be viewed "
            "as living documents. Listen to your body and be willing to adjust as needed. For highly specific "
            "goals or if you have complex medical considerations, working with a personal coach may still be "
            "beneficial.",
        ),
    ),
    FAQEntry(
        question="How should I modify the plan if I miss workouts?",
        intro="Missing occasional workouts is a normal part of training. Here's how to handle it:",
        points=(
            "Single Missed Easy Run: Simply continue with the scheduled plan. There's no need to make up the "
            "missed volume.",
            "Missed Key Workout (Intervals, Tempo, Long Run): If possible, shift the workout by 1-2 days, "
            "ensuring you still have adequate recovery before the next quality session. If you can't fit it "
            "in, prioritize the long run over other quality sessions.",
            "Missing Several Days (illness, travel, etc.): Resume training at a slightly reduced volume (about "
            "70-80% of where you left off) for a few days before returning to the scheduled plan. For absences "
            "longer than a week, you may need to back up a week in the plan.",
            "Chronic Missed Workouts: If you're regularly unable to complete the scheduled training, consider "
            "generating a new plan with fewer weekly sessions or lower volume that better fits your availability.",
        ),
        closing=(
            "Remember that consistency over time is more important than any single workout. It's better to "
            "adjust your plan to fit your life than to stress about missed sessions or try to compensate by "
            "overtraining when you do have time.",
        ),
    ),
    FAQEntry(
        question="What research supports the training methods used?",
        intro="Our training methodologies are based on extensive research in exercise physiology and sports science:",
        points=(
            "Polarized Training: Research by Stephen Seiler and others has shown that elite endurance athletes "
            "across multiple sports typically follow a polarized training distribution, with approximately 80% "
            "of training at low intensity and 20% at high intensity. Studies have demonstrated this approach "
            "often yields better adaptations than threshold-focused training.",
            "Periodization: Meta-analyses by Rhea et al. and others have confirmed that periodized training "
            "programs produce superior strength and endurance gains compared to non-periodized programs. Both "
            "linear and undulating periodization models have shown effectiveness for different populations.",
            "Running Economy: Studies by Jones, Franch, and others have identified specific training "
            "interventions that improve running economy, including high-intensity interval training, hill "
            "work, and plyometric exercises.",
            "Recovery Practices: Research by Kellmann, Halson, and others has established the importance of "
            "programmed recovery in optimizing adaptations and preventing overtraining syndrome.",
            "Tapering: Meta-analyses by Bosquet et al. have shown that reducing training volume by 40-60% while "
            "maintaining intensity for 2-3 weeks optimizes performance in endurance events.",
        ),
        closing=(
            "Our algorithm synthesizes this research along with established training principles from respected "
            "coaches and exercise scientists to create evidence-based training plans tailored to individual "
            "goals and constraints.",
        ),
    ),
)


def find_faq_entries(query: str) -> list[FAQEntry]:
    """Entries whose question or body mentions the query (case-insensitive)."""
    needle = query.strip().lower()
    if not needle:
        return list(FAQ_ENTRIES)
    return [
        entry
        for entry in FAQ_ENTRIES
        if needle in entry.question.lower()
        or needle in entry.intro.lower()
        or any(needle in text.lower() for text in (*entry.points, *entry.closing))
    ]

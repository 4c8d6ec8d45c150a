"""Built-in canonical catalog: the five popular group fitness classes."""

from ..models.canonical import ClassTypeSpec, ExerciseSpec
from ..models.catalog import DifficultyLevel, ExerciseCategory

BEGINNER = DifficultyLevel.BEGINNER
INTERMEDIATE = DifficultyLevel.INTERMEDIATE
ADVANCED = DifficultyLevel.ADVANCED

STRENGTH = ExerciseCategory.STRENGTH
CARDIO = ExerciseCategory.CARDIO
FLEXIBILITY = ExerciseCategory.FLEXIBILITY
BALANCE = ExerciseCategory.BALANCE


DEFAULT_CLASS_TYPES: list[ClassTypeSpec] = [
    ClassTypeSpec(
        name="Yoga",
        description=(
            "A mind-body practice combining physical postures, breathing techniques, "
            "and meditation to improve flexibility, strength, balance, and mental well-being."
        ),
        exercises=[
            ExerciseSpec(
                name="Downward Facing Dog",
                description="An inverted V-shape pose with hands and feet on the ground, stretching the entire body",
                difficulty_level=BEGINNER,
                equipment_needed="Yoga mat",
                primary_muscles="Full body, core, shoulders, hamstrings",
                secondary_muscles="Arms, calves, back",
                category=FLEXIBILITY,
                calories_per_minute=3,
                modifications="Place forearms on ground for easier variation, use blocks under hands for support",
                safety_notes="Keep slight bend in knees if hamstrings are tight, avoid if you have wrist injuries",
            ),
            ExerciseSpec(
                name="Child's Pose",
                description="A resting pose kneeling with arms extended forward and forehead on the ground",
                difficulty_level=BEGINNER,
                equipment_needed="Yoga mat",
                primary_muscles="Lower back, hips",
                secondary_muscles="Shoulders, arms",
                category=FLEXIBILITY,
                calories_per_minute=1,
                modifications="Place pillow under forehead, widen knees for more comfort",
                safety_notes="Avoid if you have knee injuries, can sit on heels if more comfortable",
            ),
            ExerciseSpec(
                name="Warrior I",
                description="A standing lunge pose with arms raised overhead, building strength and stability",
                difficulty_level=INTERMEDIATE,
                equipment_needed="Yoga mat",
                primary_muscles="Legs, glutes, core",
                secondary_muscles="Arms, shoulders, back",
                category=STRENGTH,
                calories_per_minute=4,
                modifications="Use blocks under hands, shorten stance for easier balance",
                safety_notes="Keep front knee aligned over ankle, avoid if you have hip injuries",
            ),
            ExerciseSpec(
                name="Warrior II",
                description="A wide-legged stance with arms extended parallel to the ground, opening the hips",
                difficulty_level=INTERMEDIATE,
                equipment_needed="Yoga mat",
                primary_muscles="Legs, glutes, core",
                secondary_muscles="Arms, shoulders",
                category=STRENGTH,
                calories_per_minute=4,
                modifications="Place forearm on front thigh for support, use wall for balance",
                safety_notes="Keep front knee tracking over ankle, don't let knee cave inward",
            ),
            ExerciseSpec(
                name="Tree Pose",
                description="A standing balance pose with one foot placed on the opposite leg's thigh or calf",
                difficulty_level=INTERMEDIATE,
                equipment_needed="Yoga mat",
                primary_muscles="Core, legs",
                secondary_muscles="Ankles, feet",
                category=BALANCE,
                calories_per_minute=3,
                modifications="Hold wall for support, place foot on ankle instead of calf/thigh",
                safety_notes="Never place foot on side of knee, use wall or chair for balance if needed",
            ),
        ],
    ),
    ClassTypeSpec(
        name="Zumba",
        description=(
            "A high-energy dance fitness program that combines Latin and international music "
            "with dance moves, creating a fun, party-like atmosphere while providing an "
            "effective cardio workout."
        ),
        exercises=[
            ExerciseSpec(
                name="Basic Salsa Step",
                description="A rhythmic step-together-step pattern moving side to side with hip action",
                difficulty_level=BEGINNER,
                equipment_needed="None",
                primary_muscles="Legs, glutes, core",
                secondary_muscles="Calves, hip flexors",
                category=CARDIO,
                calories_per_minute=8,
                modifications="Reduce hip movement, step in place instead of side to side",
                safety_notes="Wear proper dance shoes, keep movements controlled",
            ),
            ExerciseSpec(
                name="Merengue March",
                description="A simple marching step in place with alternating knee lifts and arm swings",
                difficulty_level=BEGINNER,
                equipment_needed="None",
                primary_muscles="Legs, core",
                secondary_muscles="Arms, shoulders",
                category=CARDIO,
                calories_per_minute=7,
                modifications="Lower knee lifts, reduce arm movement",
                safety_notes="Land softly on balls of feet, maintain good posture",
            ),
            ExerciseSpec(
                name="Reggaeton Bounce",
                description="A bouncing movement with bent knees and rhythmic up-and-down motion",
                difficulty_level=BEGINNER,
                equipment_needed="None",
                primary_muscles="Legs, glutes, calves",
                secondary_muscles="Core, ankles",
                category=CARDIO,
                calories_per_minute=9,
                modifications="Reduce bounce height, hold onto something for balance",
                safety_notes="Keep knees soft, land on balls of feet to reduce impact",
            ),
            ExerciseSpec(
                name="Cumbia Step",
                description="A side-to-side stepping pattern with a slight rocking motion",
                difficulty_level=BEGINNER,
                equipment_needed="None",
                primary_muscles="Legs, core, hips",
                secondary_muscles="Calves, glutes",
                category=CARDIO,
                calories_per_minute=7,
                modifications="Smaller steps, less hip movement",
                safety_notes="Keep weight centered, avoid overextending steps",
            ),
            ExerciseSpec(
                name="Cha-Cha-Cha",
                description="A quick triple-step pattern with a rock step, creating a lively rhythm",
                difficulty_level=INTERMEDIATE,
                equipment_needed="None",
                primary_muscles="Legs, calves, core",
                secondary_muscles="Ankles, hip flexors",
                category=CARDIO,
                calories_per_minute=8,
                modifications="Slow down the tempo, simplify footwork",
                safety_notes="Start slowly to learn the pattern, keep movements light and quick",
            ),
        ],
    ),
    ClassTypeSpec(
        name="Spinning/Indoor Cycling",
        description=(
            "An intense cardiovascular workout performed on stationary bikes, featuring "
            "music-driven sessions with varied resistance and speed to simulate outdoor "
            "cycling conditions."
        ),
        exercises=[
            ExerciseSpec(
                name="Seated Flat Road",
                description="Basic seated pedaling position with moderate resistance for endurance building",
                difficulty_level=BEGINNER,
                equipment_needed="Stationary bike, cycling shoes (optional)",
                primary_muscles="Quadriceps, hamstrings, calves",
                secondary_muscles="Glutes, core",
                category=CARDIO,
                calories_per_minute=12,
                modifications="Lower resistance, slower cadence",
                safety_notes="Proper bike fit essential, maintain good posture, stay hydrated",
            ),
            ExerciseSpec(
                name="Standing Climb",
                description="Pedaling while standing with high resistance to simulate uphill cycling",
                difficulty_level=INTERMEDIATE,
                equipment_needed="Stationary bike, cycling shoes (optional)",
                primary_muscles="Quadriceps, glutes, hamstrings",
                secondary_muscles="Core, calves, upper body",
                category=STRENGTH,
                calories_per_minute=15,
                modifications="Lower resistance, shorter duration",
                safety_notes="Engage core, don't bounce, maintain controlled movement",
            ),
            ExerciseSpec(
                name="Seated Climb",
                description="Seated pedaling with increased resistance to build leg strength",
                difficulty_level=BEGINNER,
                equipment_needed="Stationary bike, cycling shoes (optional)",
                primary_muscles="Quadriceps, hamstrings, glutes",
                secondary_muscles="Calves, core",
                category=STRENGTH,
                calories_per_minute=13,
                modifications="Moderate resistance increase, maintain comfortable cadence",
                safety_notes="Keep upper body relaxed, don't grip handlebars too tightly",
            ),
            ExerciseSpec(
                name="Jumps (Seated to Standing)",
                description="Alternating between seated and standing positions in rhythm",
                difficulty_level=INTERMEDIATE,
                equipment_needed="Stationary bike, cycling shoes (optional)",
                primary_muscles="Full body, core, legs",
                secondary_muscles="Arms, shoulders",
                category=CARDIO,
                calories_per_minute=14,
                modifications="Longer intervals between position changes, lower resistance",
                safety_notes="Smooth transitions, engage core, maintain bike control",
            ),
            ExerciseSpec(
                name="Sprints",
                description="High-speed pedaling with moderate resistance for short bursts",
                difficulty_level=ADVANCED,
                equipment_needed="Stationary bike, cycling shoes (optional)",
                primary_muscles="Quadriceps, hamstrings, calves",
                secondary_muscles="Glutes, core, cardiovascular system",
                category=CARDIO,
                calories_per_minute=18,
                modifications="Shorter sprint intervals, lower resistance",
                safety_notes="Proper warm-up essential, maintain control, cool down properly",
            ),
        ],
    ),
    ClassTypeSpec(
        name="HIIT",
        description=(
            "A time-efficient workout method alternating between short bursts of intense "
            "exercise and brief recovery periods to maximize calorie burn and improve "
            "cardiovascular fitness."
        ),
        exercises=[
            ExerciseSpec(
                name="Burpees",
                description="A full-body movement combining a squat, plank, push-up, and jump",
                difficulty_level=ADVANCED,
                equipment_needed="None",
                primary_muscles="Full body, core, legs, chest",
                secondary_muscles="Arms, shoulders, back",
                category=CARDIO,
                calories_per_minute=15,
                modifications="Step back instead of jumping, remove push-up, no jump at the end",
                safety_notes="Land softly, maintain good form throughout, modify as needed",
            ),
            ExerciseSpec(
                name="Mountain Climbers",
                description="A plank position with alternating knee drives toward the chest",
                difficulty_level=INTERMEDIATE,
                equipment_needed="None",
                primary_muscles="Core, shoulders, legs",
                secondary_muscles="Arms, glutes, cardiovascular system",
                category=CARDIO,
                calories_per_minute=12,
                modifications="Slow down the pace, place hands on elevated surface",
                safety_notes="Maintain plank position, keep hips level, engage core",
            ),
            ExerciseSpec(
                name="Jump Squats",
                description="Squatting down and explosively jumping up, landing softly",
                difficulty_level=INTERMEDIATE,
                equipment_needed="None",
                primary_muscles="Quadriceps, glutes, hamstrings",
                secondary_muscles="Calves, core",
                category=STRENGTH,
                calories_per_minute=13,
                modifications="Regular squats without jumping, smaller jump height",
                safety_notes="Land softly on balls of feet, keep knees aligned, proper squat form",
            ),
            ExerciseSpec(
                name="High Knees",
                description="Running in place while lifting knees as high as possible",
                difficulty_level=BEGINNER,
                equipment_needed="None",
                primary_muscles="Hip flexors, quadriceps, calves",
                secondary_muscles="Core, glutes",
                category=CARDIO,
                calories_per_minute=10,
                modifications="Lower knee height, marching in place instead of running",
                safety_notes="Land on balls of feet, maintain good posture, pump arms naturally",
            ),
            ExerciseSpec(
                name="Push-ups",
                description="A classic upper body exercise lowering and pressing the body up from the ground",
                difficulty_level=INTERMEDIATE,
                equipment_needed="None",
                primary_muscles="Chest, shoulders, triceps",
                secondary_muscles="Core, back",
                category=STRENGTH,
                calories_per_minute=8,
                modifications="Knee push-ups, wall push-ups, incline push-ups",
                safety_notes="Keep body in straight line, lower slowly, full range of motion",
            ),
        ],
    ),
    ClassTypeSpec(
        name="Pilates",
        description=(
            "A low-impact exercise method focusing on core strength, flexibility, and body "
            "awareness through controlled, precise movements and proper breathing techniques."
        ),
        exercises=[
            ExerciseSpec(
                name="The Hundred",
                description="Lying on back, pumping arms while holding legs in tabletop position",
                difficulty_level=INTERMEDIATE,
                equipment_needed="Pilates mat",
                primary_muscles="Core, abdominals",
                secondary_muscles="Hip flexors, arms",
                category=STRENGTH,
                calories_per_minute=5,
                modifications="Keep head down, bend knees, reduce arm pumping",
                safety_notes="Keep lower back pressed into mat, breathe rhythmically",
            ),
            ExerciseSpec(
                name="Roll Up",
                description="Slowly rolling up from lying to seated position using core control",
                difficulty_level=INTERMEDIATE,
                equipment_needed="Pilates mat",
                primary_muscles="Core, abdominals, hip flexors",
                secondary_muscles="Spine, back",
                category=FLEXIBILITY,
                calories_per_minute=4,
                modifications="Bend knees, use hands for assistance, partial roll up",
                safety_notes="Move slowly and controlled, don't force the movement",
            ),
            ExerciseSpec(
                name="Single Leg Circles",
                description="Lying down, drawing circles in the air with one extended leg",
                difficulty_level=BEGINNER,
                equipment_needed="Pilates mat",
                primary_muscles="Hip flexors, core, glutes",
                secondary_muscles="Inner thighs, outer thighs",
                category=FLEXIBILITY,
                calories_per_minute=3,
                modifications="Smaller circles, bend supporting leg, hold thigh for support",
                safety_notes="Keep hips stable, control the movement, don't let back arch",
            ),
            ExerciseSpec(
                name="Rolling Like a Ball",
                description="Balancing on tailbone and rolling backward and forward",
                difficulty_level=INTERMEDIATE,
                equipment_needed="Pilates mat",
                primary_muscles="Core, abdominals, back",
                secondary_muscles="Hip flexors, spine",
                category=BALANCE,
                calories_per_minute=4,
                modifications="Hold behind thighs, smaller rolling motion, rock gently",
                safety_notes="Keep chin to chest, control the roll, avoid rolling on neck",
            ),
            ExerciseSpec(
                name="Single Leg Stretch",
                description="Alternating knee-to-chest pulls while extending the opposite leg",
                difficulty_level=BEGINNER,
                equipment_needed="Pilates mat",
                primary_muscles="Core, hip flexors",
                secondary_muscles="Glutes, hamstrings",
                category=FLEXIBILITY,
                calories_per_minute=5,
                modifications="Keep head down, higher leg extension, slower pace",
                safety_notes="Keep lower back pressed into mat, switch legs smoothly",
            ),
        ],
    ),
]

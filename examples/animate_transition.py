"""Example: animate |0⟩ → |+⟩ → |+i⟩ with a mid-flight retarget."""
import sys
sys.path.insert(0, 'src')

from tiny_bloch import (
    AnimationConfig,
    AnimationDriver,
    ManualFrameScheduler,
    TrajectoryHistory,
    common_state,
    describe_state,
)

print("=" * 50)
print("tiny-bloch: Animated Transition Example")
print("=" * 50)

sched = ManualFrameScheduler()
history = TrajectoryHistory(max_points=50)
driver = AnimationDriver(
    common_state('zero'),
    AnimationConfig(duration_ms=300, easing='easeInOut'),
    scheduler=sched,
    on_animation_start=lambda: print(f"\n[{sched.now:6.1f} ms] start"),
    on_animation_end=lambda: print(f"[{sched.now:6.1f} ms] end"),
    on_state_change=history.record,
)

driver.set_target(common_state('plus'))
for _ in range(8):
    sched.step()

# Retarget halfway: the new transition starts from wherever we are now
driver.set_target(common_state('plus_i'))
sched.run_until_idle()

print(f"\nRecorded {len(history)} states:")
for state in history.recent(5):
    print(f"  {describe_state(state)}")

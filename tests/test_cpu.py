from chipemu.cpu import CPU, PROGRAM_START


def test_new_cpu_starts_at_program_start():
    cpu = CPU()
    assert cpu.pc == PROGRAM_START == 0x200
    assert cpu.sp == 0
    assert cpu.i == 0


def test_register_and_stack_sizes():
    cpu = CPU()
    assert cpu.v == [0] * 16
    assert cpu.stack == [0] * 32


def test_instances_do_not_share_registers():
    first, second = CPU(), CPU()
    first.v[3] = 9
    assert second.v[3] == 0


def test_reset_restores_power_on_state():
    cpu = CPU()
    cpu.pc = 0x456
    cpu.sp = 4
    cpu.i = 0x123
    cpu.v[5] = 7
    cpu.stack[2] = 0x300
    cpu.delay_timer = 10
    cpu.sound_timer = 20
    cpu.reset()
    assert cpu == CPU()
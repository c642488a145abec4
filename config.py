from dataclasses import dataclass

from game import EMPTY_POSITION

@dataclass
class TablebaseConfig:
    show_progress: bool = False   # tqdm bar while generating
    verbose: bool = True          # summary lines after generation

@dataclass
class ShellConfig:
    prompt: str = "wreck :: "
    start_position: str = EMPTY_POSITION
    banner: str = (
        "The Wreck Tic-Tac-Toe Engine\n"
        "\n"
        "Type 'help' for help regarding commands"
    )

@dataclass
class Config:
    tablebase: TablebaseConfig = None
    shell: ShellConfig = None
    
    def __post_init__(self):
        if self.tablebase is None:
            self.tablebase = TablebaseConfig()
        if self.shell is None:
            self.shell = ShellConfig()

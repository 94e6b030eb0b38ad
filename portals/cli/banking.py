"""Banking system console."""

from portals.cli.base import ConsoleMenu
from portals.repositories.account import AccountRepository


class BankingConsole(ConsoleMenu):
    title = "======= BANKING SYSTEM MENU ======="
    exit_message = "Exiting. Goodbye!"

    def __init__(self, repository: AccountRepository, **kwargs):
        super().__init__(**kwargs)
        self.repository = repository

    def options(self):
        return [
            ("1", "Create Account", self.create_account),
            ("2", "Deposit Money", self.deposit),
            ("3", "Withdraw Money", self.withdraw),
            ("4", "Check Balance", self.check_balance),
            ("5", "Exit", None),
        ]

    def create_account(self) -> None:
        number = self.ask("Enter account number: ")
        holder = self.ask("Enter account holder name: ")
        initial_balance = self.ask_float("Enter initial balance: ")
        self.repository.create_account(number, holder, initial_balance)
        self.say("Account created successfully.")

    def deposit(self) -> None:
        number = self.ask("Enter account number: ")
        amount = self.ask_float("Enter deposit amount: ")
        account = self.repository.deposit(number, amount)
        self.say(f"Deposit successful. New balance: ${account.balance}")

    def withdraw(self) -> None:
        number = self.ask("Enter account number: ")
        amount = self.ask_float("Enter withdrawal amount: ")
        account = self.repository.withdraw(number, amount)
        self.say(f"Withdrawal successful. New balance: ${account.balance}")

    def check_balance(self) -> None:
        account = self.repository.get_account(self.ask("Enter account number: "))
        self.say(f"Account Holder: {account.account_holder}")
        self.say(f"Account Number: {account.account_number}")
        self.say(f"Balance: ${account.balance}")

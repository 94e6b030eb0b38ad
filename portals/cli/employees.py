"""Employee Management Portal console."""

from portals.cli.base import ConsoleMenu, parse_skills
from portals.exceptions import InvalidInputError
from portals.models.employee import Employee
from portals.repositories.employee import EmployeeRepository
from portals.schemas.employee import EmployeeUpdate


class EmployeeConsole(ConsoleMenu):
    title = "Employee Management Portal"

    def __init__(self, repository: EmployeeRepository, page_size: int = 5, **kwargs):
        super().__init__(**kwargs)
        self.repository = repository
        self.page_size = page_size

    def options(self):
        return [
            ("1", "Add Employee", self.add_employee),
            ("2", "Update Employee", self.update_employee),
            ("3", "Delete Employee", self.delete_employee),
            ("4", "Search Employees", self.search_employees),
            ("5", "List Employees (Paginated)", self.list_employees),
            ("6", "Department Statistics", self.department_statistics),
            ("7", "Exit", None),
        ]

    def add_employee(self) -> None:
        name = self.ask("Name: ")
        email = self.ask("Email: ")
        department = self.ask("Department: ")
        skills = parse_skills(self.ask("Skills (comma separated): "))
        joining_date = self.ask_date("Joining Date (yyyy-MM-dd): ")

        self.repository.add_employee(Employee(
            name=name,
            email=email,
            department=department,
            skills=skills,
            joining_date=joining_date
        ))
        self.say("Employee added.")

    def update_employee(self) -> None:
        email = self.ask("Email of employee to update: ")
        self.say("Leave input blank to skip a field.")

        changes = {}
        department = self.ask("New Department: ")
        if department:
            changes["department"] = department
        skills = self.ask("New Skills (comma separated): ")
        if skills:
            changes["skills"] = parse_skills(skills)
        try:
            joining_date = self.ask_date("New Joining Date (yyyy-MM-dd): ", required=False)
        except InvalidInputError:
            self.say("Invalid date format, skipping joiningDate update.")
            joining_date = None
        if joining_date is not None:
            changes["joining_date"] = joining_date

        self.repository.update_employee(email, EmployeeUpdate(**changes))
        self.say("Employee updated.")

    def delete_employee(self) -> None:
        mode = self.ask("Delete by (1) Email or (2) ID? ")
        if mode == "1":
            self.repository.delete_employee_by_email(self.ask("Enter email: "))
        elif mode == "2":
            self.repository.delete_employee_by_id(self.ask("Enter employee ID: "))
        else:
            self.say("Invalid option.")
            return
        self.say("Employee deleted.")

    def search_employees(self) -> None:
        name = self.ask("Search by name (partial): ")
        department = self.ask("Search by department: ")
        skill = self.ask("Search by skill: ")
        from_date = self.ask_date("Joining Date From (yyyy-MM-dd): ", required=False)
        to_date = self.ask_date("Joining Date To (yyyy-MM-dd): ", required=False)

        found = self.repository.search_employees(
            name or None,
            department or None,
            skill or None,
            from_date,
            to_date
        )
        self.say("Search Results:")
        for employee in found:
            self.say(str(employee))

    def list_employees(self) -> None:
        page = self.ask_int("Page number: ")
        sort_by = self.ask("Sort by (name/joiningDate): ")
        ascending = self.ask_bool("Ascending? (true/false): ")

        results = self.repository.list_employees(page, self.page_size, sort_by, ascending)
        self.say(f"Page {page} results:")
        for employee in results:
            self.say(str(employee))

    def department_statistics(self) -> None:
        self.say("Employees per Department:")
        for department, count in self.repository.department_statistics().items():
            self.say(f"{department}: {count}")

from enum import Enum


class UserRole(str, Enum):
    faculty = "faculty"
    hod = "hod"
    dean = "dean"
    oric = "oric"
    admin = "admin"
    external = "external"


class Department(str, Enum):
    # EXACTLY 17 academic departments
    civil = "Civil Engineering"
    environmental = "Environmental Engineering"
    electrical = "Electrical Engineering"
    electronics = "Electronics Engineering"
    biomedical = "Biomedical Engineering Technology"
    mechanical = "Mechanical Engineering"
    metallurgy = "Metallurgy & Material Engineering"
    energy = "Energy Engineering"
    mechatronics = "Mechatronics Engineering"
    computer_science = "Computer Science"
    computer_engineering = "Computer Engineering"
    software = "Software Engineering"
    telecom = "Telecommunication Engineering"
    industrial = "Industrial Engineering"
    humanities = "Humanities & Social Sciences"
    mathematics = "Mathematical Sciences"
    physical_sciences = "Physical Sciences"


class Designation(str, Enum):
    professor = "Professor"
    associate_professor = "Associate Professor"
    assistant_professor = "Assistant Professor"
    lecturer = "Lecturer"
    research_associate = "Research Associate"
    post_doc = "Post Doc"

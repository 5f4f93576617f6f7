from hf_report.cli import main

main()
